"""
Typed input errors raised by the statistics engine before any numeric work begins.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Optional

from engine.enums import ErrorKind


class PredictionInputError(ValueError):

    def __init__(self, kind: ErrorKind, message: str, index: Optional[int] = None) -> None:
        super().__init__(message)
        self.kind = kind
        self.index = index

    def __repr__(self) -> str:
        return f"PredictionInputError(kind={self.kind.value!r}, index={self.index!r}, message={str(self)!r})"
