"""Pydantic models for generator configuration."""

from pydantic import BaseModel, Field, model_validator

DEFAULT_MAX_ARITY = 6

DEFAULT_HEADER = [
    "// Licensed to the .NET Foundation under one or more agreements.",
    "// The .NET Foundation licenses this file to you under the MIT license.",
]


class GeneratorConfig(BaseModel):
    """Settings for one generation run."""

    max_arity: int = Field(default=DEFAULT_MAX_ARITY, ge=1)
    class_file: str = "ResultsOfT.Generated.cs"
    tests_file: str = "../test/ResultsOfTTests.Generated.cs"
    class_namespace: str = "Microsoft.AspNetCore.Http.HttpResults"
    test_namespace: str = "Microsoft.AspNetCore.Http.Result"
    test_class_name: str = "ResultsOfTTests"
    header: list[str] = Field(default_factory=lambda: list(DEFAULT_HEADER))
    generated_by: str = "src/Http/Http.Results/tools/ResultsOfTGenerator"

    @model_validator(mode="before")
    @classmethod
    def normalize_header(cls, data: dict) -> dict:
        """Normalize a single header string to a list of lines."""
        if isinstance(data, dict):
            header = data.get("header")
            if isinstance(header, str):
                data["header"] = header.splitlines()
        return data

    @property
    def generated_notice(self) -> str:
        return f"// This file is generated by a tool. See: {self.generated_by}"

    def with_max_arity(self, max_arity: int | None) -> "GeneratorConfig":
        """Return a copy with max_arity overridden, or self when None."""
        if max_arity is None:
            return self
        return self.model_validate({**self.model_dump(), "max_arity": max_arity})
