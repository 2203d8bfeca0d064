import os
import unittest

from mockito import unstub, when

from qgames import functions


class Test_getBytes(unittest.TestCase):
    def test_plain_numbers(self):
        self.assertEqual(10, functions.getBytes(10))
        self.assertEqual(10, functions.getBytes("10"))

    def test_multipliers(self):
        self.assertEqual(1024, functions.getBytes("1KB"))
        self.assertEqual(1024, functions.getBytes("1k"))
        self.assertEqual(10485760, functions.getBytes("10MB"))
        self.assertEqual(1048576, functions.getBytes("1 M"))
        self.assertEqual(1073741824, functions.getBytes("1GB"))
        self.assertEqual(1099511627776, functions.getBytes("1TB"))

    def test_invalid_input(self):
        self.assertRaises(TypeError, functions.getBytes, "")
        self.assertRaises(TypeError, functions.getBytes, "1.5MB")
        self.assertRaises(TypeError, functions.getBytes, "MB")


class Test_getAbsolutePath(unittest.TestCase):
    def tearDown(self):
        unstub()

    def test_absolute_path(self):
        self.assertEqual("/var/log/qgames.log", functions.getAbsolutePath("/var/log/../log/qgames.log"))

    def test_relative_path(self):
        self.assertEqual(
            os.path.join(os.getcwd(), "games", "qgames.log"),
            functions.getAbsolutePath("games/qgames.log"),
        )

    def test_user_prefix(self):
        self.assertEqual(
            os.path.join(os.path.expanduser("~"), "qgames.log"),
            functions.getAbsolutePath("~/qgames.log"),
        )

    def test_home_prefix(self):
        when(functions).get_home_path(create=True).thenReturn("/opt/qgames-home")
        self.assertEqual("/opt/qgames-home/qgames.log", functions.getAbsolutePath("@home/qgames.log"))


class Test_getShortPath(unittest.TestCase):
    def tearDown(self):
        unstub()

    def test_home_prefix(self):
        when(functions).get_home_path(create=False).thenReturn("/opt/qgames-home")
        self.assertEqual("@home/qgames.ini", functions.getShortPath("/opt/qgames-home/qgames.ini"))

    def test_user_prefix(self):
        path = os.path.join(os.path.expanduser("~"), "conf", "qgames.ini")
        self.assertEqual("~/conf/qgames.ini", functions.getShortPath(path))

    def test_other_path(self):
        self.assertEqual("/etc/qgames/qgames.ini", functions.getShortPath("/etc/qgames/qgames.ini"))


class Test_console_exit(unittest.TestCase):
    def test_exit(self):
        with self.assertRaises(SystemExit) as cm:
            functions.console_exit("ERROR: something went wrong")
        self.assertEqual("ERROR: something went wrong", cm.exception.code)


if __name__ == "__main__":
    unittest.main()
