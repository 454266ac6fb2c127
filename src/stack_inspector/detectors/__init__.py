"""Built-in classification rules, one per technology domain."""

from stack_inspector.detectors.authentication import AUTHENTICATION
from stack_inspector.detectors.base import detect_features, exact, prefix, signature
from stack_inspector.detectors.cloud import CLOUD_SERVICES
from stack_inspector.detectors.data_access import DATA_ACCESS
from stack_inspector.detectors.monitoring import LOGGING_MONITORING
from stack_inspector.detectors.testing import TESTING_FRAMEWORKS
from stack_inspector.detectors.web import WEB_FRAMEWORK
from stack_inspector.models import FeatureRule

DEFAULT_RULES: tuple[FeatureRule, ...] = (
    WEB_FRAMEWORK,
    DATA_ACCESS,
    AUTHENTICATION,
    CLOUD_SERVICES,
    LOGGING_MONITORING,
    TESTING_FRAMEWORKS,
)

__all__ = [
    "AUTHENTICATION",
    "CLOUD_SERVICES",
    "DATA_ACCESS",
    "DEFAULT_RULES",
    "LOGGING_MONITORING",
    "TESTING_FRAMEWORKS",
    "WEB_FRAMEWORK",
    "detect_features",
    "exact",
    "prefix",
    "signature",
]
