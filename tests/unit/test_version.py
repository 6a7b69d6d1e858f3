"""tests/unit/test_version.py"""

import urlsplice


def test_version():
    """Verify that the version string is present and valid."""
    assert isinstance(urlsplice.__version__, str)
    assert len(urlsplice.__version__) > 0
    # Basic semver-ish check
    assert urlsplice.__version__.count(".") >= 1
