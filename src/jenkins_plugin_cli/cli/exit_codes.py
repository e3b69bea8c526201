"""Exit codes for jenkins-plugin-cli.

- 0: Success
- 3: Invalid usage (malformed option or environment value)
"""

from __future__ import annotations

EXIT_SUCCESS = 0
EXIT_INVALID_USAGE = 3
