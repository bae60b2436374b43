# Copyright 2023-2025 ETH Zurich. All rights reserved.

__version__ = "0.1.0"
