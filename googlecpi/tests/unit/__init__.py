import unittest


class CPITest(unittest.TestCase):
    pass
