import os
import pytest

MIB = 1024 * 1024


def make_file(path, size):
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, "wb") as f:
        # sparse where the filesystem allows it; st_size is what gets counted
        f.truncate(size)
    return str(path)


@pytest.fixture
def tree(tmp_path):
    """root/A: 10 MiB, root/B: 30 MiB + 5 MiB extra, root/C: empty, plus a top-level file."""
    root = tmp_path / "root"
    make_file(root / "A" / "a1.bin", 4 * MIB)
    make_file(root / "A" / "deep" / "deeper" / "a2.bin", 6 * MIB)
    make_file(root / "B" / "b1.bin", 20 * MIB)
    make_file(root / "B" / "sub" / "b2.bin", 10 * MIB)
    make_file(root / "B" / "locked.bin", 5 * MIB)
    (root / "C").mkdir()
    make_file(root / "loose.bin", 50 * MIB)
    return root
