"""Allow running the package with `python -m cnbrates`."""

from cnbrates.app import main

raise SystemExit(main())
