"""Entry-point script delegating to app.scripts.create_user."""

from __future__ import annotations

from app.scripts.create_user import main


if __name__ == "__main__":  # pragma: no cover - manual invocation only
    raise SystemExit(main())
