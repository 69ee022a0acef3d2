"""Top-level package for docpager.

Provides subpackages:
- docpager.core – immutable document model (Run, Block, Document)
- docpager.pagination – measurement and greedy page packing
- docpager.scheduling – pass guard, tickers and the page distributor
- docpager.editing – toolbar commands over a block selection
- docpager.output – PDF rendering and page previews
"""

def _get_version() -> str:
    """Get version from pyproject.toml (dev) or importlib.metadata (installed)."""
    from pathlib import Path

    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        try:
            content = pyproject.read_text()
            for line in content.splitlines():
                if line.strip().startswith("version"):
                    # Parse: version = "0.1.0"
                    return line.split("=")[1].strip().strip('"').strip("'")
        except OSError:
            pass

    # Fallback to importlib.metadata for installed package
    try:
        from importlib.metadata import version as pkg_version
        return pkg_version("docpager")
    except Exception:
        return "0.0.0"

__version__ = _get_version()
__all__: list[str] = ["__version__"]
