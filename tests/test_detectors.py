"""Tests for the built-in classification rules."""

import pytest

from stack_inspector.detectors import (
    AUTHENTICATION,
    CLOUD_SERVICES,
    DATA_ACCESS,
    DEFAULT_RULES,
    LOGGING_MONITORING,
    TESTING_FRAMEWORKS,
    WEB_FRAMEWORK,
    detect_features,
    exact,
    prefix,
    signature,
)
from stack_inspector.models import FeatureRule, MatchPolicy, PackageInfo


def _pkg(name, version="1.0.0", projects=None):
    return PackageInfo(name=name, version=version, is_direct=True, projects=projects or ["App"])


def _names(features):
    return [f.name for f in features]


class TestRegistry:
    def test_display_orders(self):
        assert [(r.category, r.display_order) for r in DEFAULT_RULES] == [
            ("Web Framework Features", 1),
            ("Data Access", 2),
            ("Authentication & Security", 3),
            ("Cloud Services", 4),
            ("Logging & Monitoring", 5),
            ("Testing Frameworks", 6),
        ]

    def test_every_rule_has_signatures(self):
        assert all(rule.signatures for rule in DEFAULT_RULES)


class TestDetectFeatures:
    def test_empty_catalog(self):
        assert detect_features(WEB_FRAMEWORK, []) == []

    def test_finding_carries_package_details(self):
        (f,) = detect_features(DATA_ACCESS, [_pkg("Microsoft.EntityFrameworkCore", "8.0.1", ["Data", "Api"])])
        assert f.name == "Entity Framework Core"
        assert f.package == "Microsoft.EntityFrameworkCore"
        assert f.version == "8.0.1"
        assert f.category == "Data Access"
        assert f.projects == ["Data", "Api"]
        assert f.description == "Object-relational mapping framework"

    def test_exact_match_is_case_insensitive(self):
        (f,) = detect_features(DATA_ACCESS, [_pkg("MICROSOFT.entityframeworkcore")])
        assert f.name == "Entity Framework Core"
        assert f.package == "MICROSOFT.entityframeworkcore"

    def test_exact_does_not_match_sub_package(self):
        features = detect_features(DATA_ACCESS, [_pkg("Microsoft.EntityFrameworkCore.Design")])
        assert features == []

    def test_unique_takes_first_catalog_entry(self):
        catalog = [_pkg("Swashbuckle.AspNetCore.SwaggerGen", "6.5.0"), _pkg("Swashbuckle.AspNetCore", "6.6.0")]
        (f,) = detect_features(WEB_FRAMEWORK, catalog)
        assert f.name == "Swagger/OpenAPI"
        assert f.package == "Swashbuckle.AspNetCore.SwaggerGen"

    def test_unique_alternatives_first_entry_wins(self):
        catalog = [_pkg("Serilog.AspNetCore"), _pkg("Serilog")]
        features = detect_features(LOGGING_MONITORING, catalog)
        assert [(f.name, f.package) for f in features] == [("Serilog", "Serilog.AspNetCore")]

    def test_all_matches_reports_every_entry(self):
        catalog = [
            _pkg("Azure.Security.KeyVault.Secrets"),
            _pkg("Azure.Security.KeyVault.Keys"),
            _pkg("Azure.Storage.Blobs"),
        ]
        features = detect_features(CLOUD_SERVICES, catalog)
        assert _names(features) == ["Azure Blob Storage", "Azure Key Vault", "Azure Key Vault"]
        assert [f.package for f in features if f.name == "Azure Key Vault"] == [
            "Azure.Security.KeyVault.Secrets",
            "Azure.Security.KeyVault.Keys",
        ]

    def test_aws_sub_feature_names(self):
        features = detect_features(CLOUD_SERVICES, [_pkg("AWSSDK.S3"), _pkg("AWSSDK.DynamoDB")])
        assert _names(features) == ["AWS S3", "AWS DynamoDB"]

    def test_aws_prefix_case_insensitive(self):
        (f,) = detect_features(CLOUD_SERVICES, [_pkg("awssdk.SQS")])
        assert f.name == "AWS SQS"

    def test_grpc_alternatives_all_matches(self):
        catalog = [_pkg("Grpc.AspNetCore"), _pkg("Grpc.Net.Client"), _pkg("Grpc.Core")]
        features = detect_features(WEB_FRAMEWORK, catalog)
        assert [f.package for f in features] == ["Grpc.AspNetCore", "Grpc.Net.Client"]

    def test_api_versioning_peers(self):
        catalog = [_pkg("Asp.Versioning.Mvc"), _pkg("Asp.Versioning.Http")]
        assert _names(detect_features(WEB_FRAMEWORK, catalog)) == ["API Versioning", "API Versioning"]

    def test_seq_sink_is_not_serilog(self):
        catalog = [_pkg("Serilog.Sinks.Seq")]
        assert _names(detect_features(LOGGING_MONITORING, catalog)) == ["Seq"]

    def test_overlapping_signatures_both_fire(self):
        rule = FeatureRule(
            category="Custom",
            display_order=9,
            signatures=(
                signature("Contoso", prefix("Contoso.")),
                signature("Contoso Client", exact("Contoso.Client")),
            ),
        )
        features = detect_features(rule, [_pkg("Contoso.Client")])
        assert _names(features) == ["Contoso", "Contoso Client"]

    def test_catalog_not_mutated(self):
        catalog = [_pkg("xunit", projects=["T"])]
        (f,) = detect_features(TESTING_FRAMEWORKS, catalog)
        f.projects.append("Other")
        assert catalog[0].projects == ["T"]

    def test_missing_fields_degrade_to_defaults(self):
        class Bare:
            name = "Moq"

        (f,) = detect_features(TESTING_FRAMEWORKS, [Bare()])  # type: ignore[list-item]
        assert f.version == ""
        assert f.projects == []

    def test_missing_name_does_not_match(self):
        class Nameless:
            version = "1.0"

        assert detect_features(TESTING_FRAMEWORKS, [Nameless()]) == []  # type: ignore[list-item]


class TestAuthentication:
    def test_identity_alternatives(self):
        (f,) = detect_features(AUTHENTICATION, [_pkg("Microsoft.AspNetCore.Identity.EntityFrameworkCore")])
        assert f.name == "ASP.NET Core Identity"

    def test_identity_server_variants(self):
        (f,) = detect_features(AUTHENTICATION, [_pkg("Duende.IdentityServer.AspNetIdentity")])
        assert f.name == "IdentityServer"

    def test_jwt_and_oidc(self):
        catalog = [
            _pkg("Microsoft.AspNetCore.Authentication.JwtBearer"),
            _pkg("Microsoft.AspNetCore.Authentication.OpenIdConnect"),
            _pkg("Microsoft.Identity.Web.UI"),
        ]
        assert _names(detect_features(AUTHENTICATION, catalog)) == [
            "JWT Bearer Authentication",
            "OpenID Connect",
            "Microsoft Identity (Azure AD)",
        ]


class TestWebFramework:
    def test_mvc_documentation_url(self):
        (f,) = detect_features(WEB_FRAMEWORK, [_pkg("Microsoft.AspNetCore.Mvc")])
        assert f.documentation_url == "https://docs.microsoft.com/aspnet/core/mvc"

    def test_mvc_does_not_match_razor_pages(self):
        (f,) = detect_features(WEB_FRAMEWORK, [_pkg("Microsoft.AspNetCore.Mvc.RazorPages")])
        assert f.name == "Razor Pages"

    def test_signalr_peers(self):
        catalog = [_pkg("Microsoft.AspNetCore.SignalR.Client"), _pkg("Microsoft.AspNetCore.SignalR.Core")]
        assert _names(detect_features(WEB_FRAMEWORK, catalog)) == ["SignalR", "SignalR"]


class TestTestingFrameworks:
    @pytest.mark.parametrize(
        "package,feature",
        [
            ("xunit", "xUnit"),
            ("NUnit", "NUnit"),
            ("MSTest.TestFramework", "MSTest"),
            ("Moq", "Moq"),
            ("FluentAssertions", "FluentAssertions"),
            ("Bogus", "Bogus"),
        ],
    )
    def test_each_framework(self, package, feature):
        assert _names(detect_features(TESTING_FRAMEWORKS, [_pkg(package)])) == [feature]

    def test_xunit_runner_alone_not_detected(self):
        assert detect_features(TESTING_FRAMEWORKS, [_pkg("xunit.runner.visualstudio")]) == []


class TestSignatureHelpers:
    def test_signature_defaults_to_unique(self):
        sig = signature("X", exact("x"))
        assert sig.policy is MatchPolicy.unique
        assert sig.matchers == (exact("x"),)

    def test_strip_prefix_without_suffix_keeps_feature(self):
        sig = signature("AWS", prefix("AWSSDK."), strip_prefix=True)
        matcher = sig.matching("AWSSDK.")
        assert matcher is not None
        assert sig.feature_name("AWSSDK.", matcher) == "AWS"
