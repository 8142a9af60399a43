from __future__ import annotations

from eid.cli import main

raise SystemExit(main())
