import os
import sys

# hacky: add repository root to PYTHONPATH, so flat modules (ctx, version, ..) are available
# during test-execution, even if not installed
repo_root = os.path.abspath(
    os.path.join(
        os.path.dirname(__file__),
        os.pardir,
    )
)
if repo_root not in sys.path:
    sys.path.insert(1, repo_root)
