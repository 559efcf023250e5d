"""
Custom exception hierarchy for luxafor.

## Exception Hierarchy

```
LuxaforError (base)
├── ParseError
│   ├── InvalidColorError
│   ├── InvalidPatternError
│   ├── InvalidLEDError
│   └── InvalidDeviceIDError
├── DeviceError
│   ├── DeviceNotFoundError
│   ├── InvalidRequestError
│   ├── UnexpectedStatusError
│   └── UnsupportedCommandError
└── ConfigurationError
    ├── ConfigFileInvalidError
    └── ConfigValidationError
```

Parse errors are raised before any I/O is attempted. Device errors wrap
the transport failure (`raise ... from e`) so hidapi and requests
exceptions never reach the caller. Nothing is retried internally.

### Example: Webhook Error Status

```python
from luxafor.exceptions import UnexpectedStatusError

try:
    light.set_solid(NamedColor.RED)
except UnexpectedStatusError as e:
    print(e.status_code)  # e.g. 500
```
"""

from .base import LuxaforError
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError
from .device import (
    DeviceError,
    DeviceNotFoundError,
    InvalidRequestError,
    UnexpectedStatusError,
    UnsupportedCommandError,
)
from .handlers import (
    ErrorContext,
    format_error_for_display,
    wrap_pydantic_error,
    wrap_transport_error,
)
from .parse import (
    InvalidColorError,
    InvalidDeviceIDError,
    InvalidLEDError,
    InvalidPatternError,
    ParseError,
)

__all__ = [
    # Config
    "ConfigFileInvalidError",
    "ConfigValidationError",
    "ConfigurationError",
    # Device
    "DeviceError",
    "DeviceNotFoundError",
    "ErrorContext",
    # Parse
    "InvalidColorError",
    "InvalidDeviceIDError",
    "InvalidLEDError",
    "InvalidPatternError",
    "InvalidRequestError",
    # Base
    "LuxaforError",
    "ParseError",
    "UnexpectedStatusError",
    "UnsupportedCommandError",
    # Handlers
    "format_error_for_display",
    "wrap_pydantic_error",
    "wrap_transport_error",
]
