# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Skip generated sources that should never be linted."""

from __future__ import annotations

from typing import Final

# SwiftGen output, generic codegen folders and GraphQL artefacts.
GENERATED_MARKERS: Final[tuple[str, ...]] = ("SwiftGen", "Generated", ".graphql")


def should_ignore(filename: str) -> bool:
    """Return ``True`` when ``filename`` contains a generated-code marker.

    Matching is plain, case-sensitive substring containment.
    """

    return any(marker in filename for marker in GENERATED_MARKERS)


__all__ = ["GENERATED_MARKERS", "should_ignore"]
