"""Backends for symbol enum output generation (Swift)."""

from .swift_generator import SwiftOptions, generate_swift, save_swift_file

__all__ = ["SwiftOptions", "generate_swift", "save_swift_file"]
