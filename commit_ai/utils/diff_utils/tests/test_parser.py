from unittest import TestCase

from ..parser import changed_files, parse_diff

SINGLE_FILE_DIFF = """diff --git a/a.txt b/a.txt
index 3b18e51..a2d4c3f 100644
--- a/a.txt
+++ b/a.txt
@@ -1,3 +1,4 @@
 line1
 line2
 line3
+line4"""

MULTI_FILE_DIFF = """diff --git a/zeta.py b/zeta.py
--- a/zeta.py
+++ b/zeta.py
@@ -10,4 +12,5 @@ def handler():
     setup()
+    validate()
-    legacy()
+    run()
     teardown()
@@ -40,2 +43,3 @@ def other():
     pass
+    return None
diff --git a/alpha.py b/alpha.py
--- a/alpha.py
+++ b/alpha.py
@@ -1 +1,2 @@
 import os
+import sys"""


class TestParseDiff(TestCase):
    def test_single_added_line(self):
        result = parse_diff(SINGLE_FILE_DIFF)

        self.assertEqual(list(result), ["a.txt"])
        self.assertEqual(result["a.txt"], {4})

    def test_files_keep_diff_order(self):
        self.assertEqual(changed_files(MULTI_FILE_DIFF), ["zeta.py", "alpha.py"])

    def test_counter_follows_hunk_headers(self):
        result = parse_diff(MULTI_FILE_DIFF)

        # context at 12, added 13, deletion does not advance, added 14
        self.assertEqual(result["zeta.py"], {13, 14, 44})
        self.assertEqual(result["alpha.py"], {2})

    def test_first_added_line_matches_hunk_start(self):
        diff = "+++ b/new.py\n@@ -0,0 +1,2 @@\n+first\n+second"
        self.assertEqual(parse_diff(diff), {"new.py": {1, 2}})

    def test_hunk_header_without_counts(self):
        diff = "+++ b/f.txt\n@@ -7 +9 @@\n+changed"
        self.assertEqual(parse_diff(diff)["f.txt"], {9})

    def test_deletion_only_file_is_listed_without_lines(self):
        diff = "--- a/f.txt\n+++ b/f.txt\n@@ -1,2 +1 @@\n keep\n-drop"
        self.assertEqual(parse_diff(diff), {"f.txt": set()})

    def test_deleted_file_is_skipped(self):
        diff = (
            "diff --git a/gone.txt b/gone.txt\n"
            "deleted file mode 100644\n"
            "--- a/gone.txt\n"
            "+++ /dev/null\n"
            "@@ -1,2 +0,0 @@\n"
            "-a\n"
            "-b"
        )
        self.assertEqual(parse_diff(diff), {})

    def test_binary_files_are_skipped(self):
        diff = (
            "diff --git a/img.png b/img.png\n"
            "index 1111111..2222222 100644\n"
            "Binary files a/img.png and b/img.png differ\n"
            + SINGLE_FILE_DIFF
        )
        self.assertEqual(changed_files(diff), ["a.txt"])

    def test_empty_diff(self):
        self.assertEqual(parse_diff(""), {})
        self.assertEqual(changed_files(""), [])

    def test_added_lines_before_any_file_are_ignored(self):
        self.assertEqual(parse_diff("+orphan\n+lines"), {})

    def test_content_before_hunk_header_counts_from_zero(self):
        self.assertEqual(parse_diff("+++ b/x.txt\n+a"), {"x.txt": {0}})

    def test_repeated_file_header_merges_lines(self):
        diff = (
            "+++ b/a.txt\n@@ -1 +1,2 @@\n ctx\n+one\n"
            "+++ b/b.txt\n@@ -1 +1 @@\n+two\n"
            "+++ b/a.txt\n@@ -20 +30,2 @@\n ctx\n+three"
        )
        result = parse_diff(diff)

        self.assertEqual(list(result), ["a.txt", "b.txt"])
        self.assertEqual(result["a.txt"], {2, 31})

    def test_trailing_tab_after_name_with_space_is_dropped(self):
        diff = (
            "diff --git a/my file.txt b/my file.txt\n"
            "--- a/my file.txt\t\n"
            "+++ b/my file.txt\t\n"
            "@@ -1,2 +1,3 @@\n"
            " one\n"
            " two\n"
            "+three"
        )

        self.assertEqual(parse_diff(diff), {"my file.txt": {3}})
