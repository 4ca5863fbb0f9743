"""
Unit tests for GPU discovery and hwmon probing.
"""

import sys
import tempfile
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT))
sys.path.insert(0, str(Path(__file__).resolve().parent))

from amdgpu_stats.core.discovery import detect_amd_gpus, find_hwmon_dir, is_amd_gpu
from amdgpu_stats.core.errors import HwmonNotFoundError, SysfsReadError
from sysfs_tree import add_card


class TestDetectAmdGpus(unittest.TestCase):
    """Test vendor and name filtering."""

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.drm = Path(self._tmp.name)

    def tearDown(self):
        self._tmp.cleanup()

    def test_amd_card_included(self):
        card = add_card(self.drm, "card0")
        self.assertEqual(detect_amd_gpus(self.drm), [card])

    def test_other_vendors_excluded(self):
        add_card(self.drm, "card0", vendor="0x10de\n")
        add_card(self.drm, "card1", vendor="0x8086")
        add_card(self.drm, "card2", vendor="1002")
        add_card(self.drm, "card3", vendor="0X1002")
        add_card(self.drm, "card4", vendor="")
        self.assertEqual(detect_amd_gpus(self.drm), [])

    def test_vendor_whitespace_trimmed(self):
        card = add_card(self.drm, "card0", vendor="  0x1002  \n")
        self.assertEqual(detect_amd_gpus(self.drm), [card])

    def test_missing_vendor_file_excluded(self):
        add_card(self.drm, "card0", vendor=None)
        self.assertEqual(detect_amd_gpus(self.drm), [])

    def test_unreadable_vendor_file_excluded(self):
        card = add_card(self.drm, "card0", vendor=None)
        (card / "device" / "vendor").mkdir()
        self.assertFalse(is_amd_gpu(card))
        self.assertEqual(detect_amd_gpus(self.drm), [])

    def test_non_card_entries_ignored(self):
        add_card(self.drm, "renderD128")
        (self.drm / "version").write_text("drm 1.1.0 20060810\n")
        card = add_card(self.drm, "card1")
        self.assertEqual(detect_amd_gpus(self.drm), [card])

    def test_multiple_cards(self):
        cards = {add_card(self.drm, f"card{i}") for i in range(3)}
        add_card(self.drm, "card9", vendor="0x10de")
        self.assertEqual(set(detect_amd_gpus(self.drm)), cards)

    def test_missing_root_is_error(self):
        with self.assertRaises(SysfsReadError) as ctx:
            detect_amd_gpus(self.drm / "missing")
        self.assertEqual(ctx.exception.path, self.drm / "missing")


class TestFindHwmonDir(unittest.TestCase):
    """Test probing for the hwmon directory."""

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.drm = Path(self._tmp.name)

    def tearDown(self):
        self._tmp.cleanup()

    def test_finds_directory_with_temp_sensor(self):
        card = add_card(self.drm, hwmon_name="hwmon5")
        self.assertEqual(find_hwmon_dir(card), card / "device" / "hwmon" / "hwmon5")

    def test_skips_directories_without_temp_sensor(self):
        card = add_card(self.drm, hwmon_name="hwmon2")
        (card / "device" / "hwmon" / "hwmon1").mkdir()
        (card / "device" / "hwmon" / "hwmon1" / "in0_input").write_text("800\n")
        self.assertEqual(find_hwmon_dir(card), card / "device" / "hwmon" / "hwmon2")

    def test_no_qualifying_directory(self):
        card = add_card(self.drm, hwmon={"freq1_input": "1\n"})
        with self.assertRaises(HwmonNotFoundError):
            find_hwmon_dir(card)

    def test_missing_hwmon_directory(self):
        card = self.drm / "card0"
        (card / "device").mkdir(parents=True)
        with self.assertRaises(HwmonNotFoundError) as ctx:
            find_hwmon_dir(card)
        self.assertIsInstance(ctx.exception.__cause__, OSError)
        self.assertEqual(ctx.exception.device, card)


if __name__ == "__main__":
    unittest.main()
