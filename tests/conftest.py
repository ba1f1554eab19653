import pytest

from debpkg import DebPackage


@pytest.fixture
def deb():
    # architecture resolves to amd64 when empty; pin it so the goldens don't depend on the default
    with DebPackage() as package:
        package.metadata.architecture = "amd64"
        yield package
