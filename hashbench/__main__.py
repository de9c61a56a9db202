# -*- coding: utf-8 -*-
import sys

from hashbench.main import main

sys.exit(main())
