"""Module entrypoint.

Allows:
    python -m bulk_log_codec
"""

from __future__ import annotations

from bulk_log_codec.server.log_server import main

if __name__ == "__main__":
    main()
