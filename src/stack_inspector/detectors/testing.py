"""Unit testing frameworks and helpers."""

from stack_inspector.detectors.base import exact, prefix, signature
from stack_inspector.models import FeatureRule

TESTING_FRAMEWORKS = FeatureRule(
    category="Testing Frameworks",
    display_order=6,
    signatures=(
        signature("xUnit", exact("xunit"), description="Unit testing framework"),
        signature("NUnit", exact("NUnit"), description="Unit testing framework"),
        signature(
            "MSTest",
            prefix("MSTest.TestFramework"),
            description="Microsoft unit testing framework",
        ),
        signature("Moq", exact("Moq"), description="Mocking framework"),
        signature(
            "FluentAssertions",
            exact("FluentAssertions"),
            description="Assertion library",
        ),
        signature(
            "Bogus",
            exact("Bogus"),
            description="Fake data generator for testing",
        ),
    ),
)
