# ---------------------------------------------------------------------------
# File: __init__.py
# ---------------------------------------------------------------------------
# Description:
#	Runtime package for pytodos: mount orchestrator and persistence.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/07/2026	pytodos maintainers			Initial coding / release
# ---------------------------------------------------------------------------

from .storage import FileStorage, MemoryStorage, Storage
from .mount import Program, mount, store_name_for

__all__ = [
	"FileStorage",
	"MemoryStorage",
	"Storage",
	"Program",
	"mount",
	"store_name_for",
]
