import os

import pytest

from formula.receipt import InstallReceipt, save_receipt
from formula.recipe import Installer
from formula.uninstall import ReceiptNotFoundError, Uninstaller


class TestUninstaller:
    def test_loads_receipt(self, source_tree, keg):
        Installer(str(source_tree), str(keg)).run()
        u = Uninstaller(str(keg))
        assert u.receipt is not None
        assert u.receipt.name == "claude-notify"

    def test_missing_receipt_raises(self, tmp_path):
        u = Uninstaller(str(tmp_path))
        assert u.receipt is None
        with pytest.raises(ReceiptNotFoundError):
            u.run()

    def test_removes_everything_and_prunes_keg(self, source_tree, keg):
        Installer(str(source_tree), str(keg)).run()
        removed = Uninstaller(str(keg)).run()
        assert str(keg / "bin" / "cn") in removed
        assert not keg.exists()

    def test_aliases_removed_before_files(self, source_tree, keg):
        Installer(str(source_tree), str(keg)).run()
        removed = Uninstaller(str(keg)).run()
        assert removed[:2] == [str(keg / "bin" / "cn"), str(keg / "bin" / "cnp")]

    def test_keeps_unrecorded_files(self, source_tree, keg):
        Installer(str(source_tree), str(keg)).run()
        extra = keg / "bin" / "user-tool"
        extra.write_text("mine")
        Uninstaller(str(keg)).run()
        assert extra.exists()
        assert not (keg / "bin" / "claude-notify").exists()
        assert not (keg / "lib").exists()

    def test_tolerates_already_removed_paths(self, tmp_path):
        receipt = InstallReceipt(
            name="claude-notify", version="1.0.0", prefix=str(tmp_path),
            source="/src", files=[str(tmp_path / "bin" / "gone")],
            links=[str(tmp_path / "bin" / "cn")],
        )
        save_receipt(receipt, str(tmp_path))
        assert Uninstaller(str(tmp_path)).run() == []
        assert not os.path.exists(tmp_path)
