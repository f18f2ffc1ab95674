#!/usr/bin/env python3
"""Issue an operator token.

Set the printed value as the ``auth_token`` cookie to edit posts:

    python scripts/issue_token.py [name]
"""

import sys

from miniblog.config import Settings
from miniblog.domain.service import JWTService
from miniblog.util.observability import configure_logfire


def main(name: str | None = None) -> int:
    """Print a signed operator token valid for ``auth.jwt_expiry_days``."""
    settings = Settings()

    configure_logfire(settings)

    token = JWTService(auth_settings=settings.auth).create_token(name)
    print(token)
    return 0


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:2]))
