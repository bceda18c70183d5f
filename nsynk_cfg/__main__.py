from __future__ import annotations

import sys

from nsynk_cfg.main import main

sys.exit(main())
