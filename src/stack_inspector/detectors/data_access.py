"""ORMs and database providers."""

from stack_inspector.detectors.base import exact, signature
from stack_inspector.models import FeatureRule

DATA_ACCESS = FeatureRule(
    category="Data Access",
    display_order=2,
    signatures=(
        signature(
            "Entity Framework Core",
            exact("Microsoft.EntityFrameworkCore"),
            description="Object-relational mapping framework",
        ),
        signature(
            "EF Core - SQL Server",
            exact("Microsoft.EntityFrameworkCore.SqlServer"),
            description="SQL Server database provider",
        ),
        signature(
            "EF Core - PostgreSQL",
            exact("Npgsql.EntityFrameworkCore.PostgreSQL"),
            description="PostgreSQL database provider",
        ),
        signature(
            "EF Core - SQLite",
            exact("Microsoft.EntityFrameworkCore.Sqlite"),
            description="SQLite database provider",
        ),
        signature(
            "EF Core - InMemory",
            exact("Microsoft.EntityFrameworkCore.InMemory"),
            description="In-memory database provider (testing)",
        ),
        signature(
            "EF Core - Cosmos DB",
            exact("Microsoft.EntityFrameworkCore.Cosmos"),
            description="Azure Cosmos DB provider",
        ),
        signature("Dapper", exact("Dapper"), description="Lightweight micro-ORM"),
        signature(
            "MongoDB Driver",
            exact("MongoDB.Driver"),
            description="NoSQL document database",
        ),
    ),
)
