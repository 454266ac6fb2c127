"""Logging and observability stacks."""

from stack_inspector.detectors.base import exact, prefix, signature
from stack_inspector.models import FeatureRule

LOGGING_MONITORING = FeatureRule(
    category="Logging & Monitoring",
    display_order=5,
    signatures=(
        signature(
            "Serilog",
            prefix("Serilog.AspNetCore"),
            exact("Serilog"),
            description="Structured logging framework",
        ),
        signature(
            "NLog",
            prefix("NLog.Web.AspNetCore"),
            exact("NLog"),
            description="Flexible logging framework",
        ),
        signature(
            "Application Insights",
            prefix("Microsoft.ApplicationInsights.AspNetCore"),
            description="Azure application monitoring",
        ),
        signature(
            "OpenTelemetry",
            prefix("OpenTelemetry"),
            description="Observability framework",
        ),
        signature(
            "Seq",
            exact("Serilog.Sinks.Seq"),
            description="Structured log server",
        ),
    ),
)
