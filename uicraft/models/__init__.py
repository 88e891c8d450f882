from .ui_version import UIVersion

__all__ = ["UIVersion"]
