"""Cloud SDKs, caches and message brokers."""

from stack_inspector.detectors.base import exact, prefix, signature
from stack_inspector.models import FeatureRule, MatchPolicy

CLOUD_SERVICES = FeatureRule(
    category="Cloud Services",
    display_order=4,
    signatures=(
        signature(
            "Azure Blob Storage",
            exact("Azure.Storage.Blobs"),
            description="Azure cloud object storage",
        ),
        signature(
            "Azure Service Bus",
            exact("Azure.Messaging.ServiceBus"),
            description="Azure messaging service",
        ),
        signature(
            "Azure Key Vault",
            prefix("Azure.Security.KeyVault"),
            description="Azure secrets management",
            policy=MatchPolicy.all_matches,
        ),
        signature(
            "Azure Cosmos DB",
            exact("Microsoft.Azure.Cosmos"),
            description="Azure NoSQL database",
        ),
        # One finding per AWS service package, named after the service.
        signature(
            "AWS",
            prefix("AWSSDK."),
            description="Amazon Web Services SDK",
            policy=MatchPolicy.all_matches,
            strip_prefix=True,
        ),
        signature(
            "Redis",
            exact("StackExchange.Redis"),
            description="In-memory data structure store",
        ),
        signature("RabbitMQ", exact("RabbitMQ.Client"), description="Message broker"),
        signature(
            "Apache Kafka",
            exact("Confluent.Kafka"),
            description="Distributed event streaming platform",
        ),
    ),
)
