from pathlib import Path

# Centralized paths for bundled assets (single source of truth)
PACKAGE_DIR = Path(__file__).parent.parent.resolve()
TEMPLATES_DIR = PACKAGE_DIR / 'templates'
INDEX_TEMPLATE = 'index.html'

__all__ = ['PACKAGE_DIR', 'TEMPLATES_DIR', 'INDEX_TEMPLATE']
