# =============================================================================
# leetlab/__main__.py - python -m leetlab
# =============================================================================

from leetlab.server import run

if __name__ == "__main__":
    run()
