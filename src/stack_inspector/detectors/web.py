"""ASP.NET Core web framework features."""

from stack_inspector.detectors.base import exact, prefix, signature
from stack_inspector.models import FeatureRule, MatchPolicy

WEB_FRAMEWORK = FeatureRule(
    category="Web Framework Features",
    display_order=1,
    signatures=(
        signature(
            "ASP.NET Core MVC",
            exact("Microsoft.AspNetCore.Mvc"),
            description="Model-View-Controller web framework",
            documentation_url="https://docs.microsoft.com/aspnet/core/mvc",
        ),
        signature(
            "Razor Pages",
            exact("Microsoft.AspNetCore.Mvc.RazorPages"),
            description="Page-based web UI framework",
        ),
        signature(
            "Blazor Server",
            exact("Microsoft.AspNetCore.Components.Server"),
            description="Server-side Blazor components",
        ),
        signature(
            "Blazor WebAssembly",
            exact("Microsoft.AspNetCore.Components.WebAssembly"),
            description="Client-side Blazor with WebAssembly",
        ),
        signature(
            "SignalR",
            prefix("Microsoft.AspNetCore.SignalR"),
            description="Real-time web functionality",
            policy=MatchPolicy.all_matches,
        ),
        signature(
            "gRPC",
            prefix("Grpc.AspNetCore"),
            prefix("Grpc.Net.Client"),
            description="High-performance RPC framework",
            policy=MatchPolicy.all_matches,
        ),
        signature(
            "Health Checks",
            exact("Microsoft.Extensions.Diagnostics.HealthChecks"),
            description="Application health monitoring",
        ),
        signature(
            "Swagger/OpenAPI",
            prefix("Swashbuckle.AspNetCore"),
            description="API documentation generation",
        ),
        signature(
            "NSwag OpenAPI",
            prefix("NSwag.AspNetCore"),
            description="API documentation and client generation",
        ),
        signature(
            "API Versioning",
            prefix("Asp.Versioning"),
            description="REST API versioning support",
            policy=MatchPolicy.all_matches,
        ),
    ),
)
