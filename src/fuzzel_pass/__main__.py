from __future__ import annotations

import sys

from fuzzel_pass.main import main

sys.exit(main())
