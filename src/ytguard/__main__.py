"""Allow running ytguard as ``python -m ytguard``."""

from ytguard.cli import run

if __name__ == "__main__":
    run()
