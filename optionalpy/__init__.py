from .optional import Optional, UNDEFINED
