"""Exit codes for CLI commands.

These map one-to-one to process exit status and should remain stable so
scripts wrapping ``vp`` can branch on them.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for CLI commands.

    - 0: Success
    - 1: User error (no app selected, unknown version, bad option)
    - 2: Environment error (missing API token, unreadable config)
    - 4: Network error (API unreachable, unexpected API response)
    - 6: Not found (channel missing, channel has no releases)
    """

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2
    NETWORK_ERROR = 4
    NOT_FOUND = 6

    def __str__(self) -> str:
        return self.name.lower().replace("_", " ")
