# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for generated-file filtering."""

from __future__ import annotations

import pytest

from difflint.discovery.ignore import should_ignore


@pytest.mark.parametrize(
    "filename",
    [
        "FooSwiftGenStrings.swift",
        "App/Generated/Assets.swift",
        "API.Generated.swift",
        ".graphql/schema.graphql",
        "Sources/Network/Queries.graphql.swift",
    ],
)
def test_should_ignore_generated_markers(filename: str) -> None:
    assert should_ignore(filename)


@pytest.mark.parametrize(
    "filename",
    [
        "Model.swift",
        "App/generated/lowercase.swift",
        "swiftgen.swift",
        "GraphQLClient.swift",
    ],
)
def test_should_ignore_keeps_regular_files(filename: str) -> None:
    assert not should_ignore(filename)
