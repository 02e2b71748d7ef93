"""Allow ``python -m nutrition_flux``."""

from nutrition_flux.main import main

raise SystemExit(main())
