"""Authentication and identity providers."""

from stack_inspector.detectors.base import exact, prefix, signature
from stack_inspector.models import FeatureRule

AUTHENTICATION = FeatureRule(
    category="Authentication & Security",
    display_order=3,
    signatures=(
        signature(
            "ASP.NET Core Identity",
            exact("Microsoft.AspNetCore.Identity"),
            exact("Microsoft.AspNetCore.Identity.EntityFrameworkCore"),
            description="Membership system with login functionality",
        ),
        signature(
            "JWT Bearer Authentication",
            exact("Microsoft.AspNetCore.Authentication.JwtBearer"),
            description="Token-based authentication",
        ),
        signature(
            "OpenID Connect",
            exact("Microsoft.AspNetCore.Authentication.OpenIdConnect"),
            description="External authentication provider",
        ),
        signature(
            "Microsoft Identity (Azure AD)",
            prefix("Microsoft.Identity.Web"),
            description="Azure Active Directory integration",
        ),
        signature(
            "IdentityServer",
            prefix("IdentityServer4"),
            prefix("Duende.IdentityServer"),
            description="OAuth 2.0 and OpenID Connect framework",
        ),
        signature(
            "Auth0",
            prefix("Auth0.AspNetCore.Authentication"),
            description="Auth0 identity platform integration",
        ),
    ),
)
