from .rendering import ScaffoldRenderer, default_literal
from .scaffold_usecase import TestScriptGenerator

__all__ = ["ScaffoldRenderer", "TestScriptGenerator", "default_literal"]
