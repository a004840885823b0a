"""
Core exerec values.

Exports the recorded interaction, execution options and process errors.
"""

from exerec.core.interaction import Interaction, ProcessError
from exerec.core.options import Options

__all__ = ["Interaction", "ProcessError", "Options"]
