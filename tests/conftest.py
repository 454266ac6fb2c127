"""Pytest configuration and fixtures."""

import pytest

from stack_inspector.models import (
    PackageReference,
    ProjectInfo,
    ProjectReference,
    TransitiveDependency,
)


@pytest.fixture
def make_project():
    """Factory for ProjectInfo records with sensible defaults."""

    def _make(name: str, packages=(), transitive=(), references=(), **kwargs) -> ProjectInfo:
        return ProjectInfo(
            project_path=f"/repo/src/{name}/{name}.csproj",
            project_name=name,
            relative_path=f"src/{name}/{name}.csproj",
            package_dependencies=[PackageReference(name=n, version=v) for n, v in packages],
            transitive_dependencies=[
                TransitiveDependency(package_name=n, version=v, source_package=s, depth=d)
                for n, v, s, d in transitive
            ],
            project_references=[
                ProjectReference(project_name=r, path=f"../{r}/{r}.csproj") for r in references
            ],
            **kwargs,
        )

    return _make


@pytest.fixture
def multi_project_repo(make_project):
    """Three projects sharing some packages."""
    return [
        make_project(
            "Web",
            packages=[("Microsoft.AspNetCore.Mvc", "2.2.0"), ("Serilog", "3.1.1")],
            transitive=[("Microsoft.Extensions.Logging", "8.0.0", "Serilog", 1)],
            references=["Data"],
            target_framework="net8.0",
        ),
        make_project(
            "Data",
            packages=[("Microsoft.EntityFrameworkCore", "8.0.1"), ("serilog", "3.0.0")],
            target_framework="net8.0",
        ),
        make_project(
            "Tests",
            packages=[("xunit", "2.9.3"), ("Moq", "4.20.72")],
            references=["Web", "Data"],
            target_framework="net8.0;net10.0",
        ),
    ]
