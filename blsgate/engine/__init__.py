"""Curve engine exports."""
from __future__ import annotations

from dataclasses import dataclass

from ..constants import DST
from .base import CurveEngine, Decoded, DecodeFailure, engine_choices
from .py_ecc_engine import PyEccEngine

DEFAULT_BACKEND = PyEccEngine.backend

@dataclass
class EngineParameters:
	backend: str = DEFAULT_BACKEND
	dst: bytes = DST

def build_engine(params: EngineParameters | None = None) -> CurveEngine:
	params = params or EngineParameters()
	return CurveEngine.get_class(params.backend)(dst=params.dst)

__all__ = [
	"CurveEngine",
	"Decoded",
	"DecodeFailure",
	"EngineParameters",
	"PyEccEngine",
	"build_engine",
	"engine_choices",
	"DEFAULT_BACKEND",
]
