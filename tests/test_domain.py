import unittest

from addrtrie import DomainMatcher, InvalidPatternError, split_and_reverse


class TestDomainMatcher(unittest.TestCase):

    def test_00__split_and_reverse(self):
        self.assertEqual(split_and_reverse('a.b.com'), ['com', 'b', 'a'])
        self.assertEqual(split_and_reverse('com'), ['com'])

    def test_01__exact(self):
        m = DomainMatcher()
        m.add('www.example.com', 'W')
        self.assertEqual(m.find('www.example.com'), 'W')
        self.assertEqual(m.find('a.www.example.com'), None)
        self.assertEqual(m.find('example.com'), None)

    def test_02__suffix_wildcard_excludes_apex(self):
        m = DomainMatcher()
        m.add('*.example.com', 'X')
        self.assertEqual(m.find('a.example.com'), 'X')
        self.assertEqual(m.find('b.a.example.com'), 'X')
        self.assertEqual(m.find('example.com'), None)
        self.assertEqual(m.find('com'), None)
        self.assertEqual(m.find('example.org'), None)

    def test_03__inclusive_wildcard(self):
        m = DomainMatcher()
        m.add('*test.com', 'Y')
        self.assertEqual(m.find('test.com'), 'Y')
        self.assertEqual(m.find('sub.test.com'), 'Y')
        self.assertEqual(m.find('a.sub.test.com'), 'Y')
        self.assertEqual(m.find('othertest.com'), None)
        self.assertEqual(m.exact_domains, {'test.com': 'Y'})

    def test_04__longest_suffix_wins(self):
        m = DomainMatcher()
        m.add('*.b.com', 'Q')
        m.add('*.a.b.com', 'P')
        self.assertEqual(m.find('x.a.b.com'), 'P')
        self.assertEqual(m.find('y.x.a.b.com'), 'P')
        self.assertEqual(m.find('a.b.com'), 'Q')
        self.assertEqual(m.find('z.b.com'), 'Q')

    def test_05__exact_beats_wildcard(self):
        m = DomainMatcher()
        m.add('*.b.com', 'Q')
        m.add('*.a.b.com', 'P')
        m.add('a.b.com', 'E1')
        m.add('x.a.b.com', 'E2')
        self.assertEqual(m.find('a.b.com'), 'E1')
        self.assertEqual(m.find('x.a.b.com'), 'E2')
        self.assertEqual(m.find('y.a.b.com'), 'P')

    def test_06__reinsert_overwrites(self):
        m = DomainMatcher()
        m.add('*.example.com', 1)
        m.add('*.example.com', 2)
        m.add('host.example.net', 1)
        m.add('host.example.net', 2)
        self.assertEqual(m.find('a.example.com'), 2)
        self.assertEqual(m.find('host.example.net'), 2)
        self.assertEqual(len(m.exact_domains), 1)
        node = m.head.children['com'].children['example']
        self.assertEqual(node.value, 2)
        self.assertEqual(node.children, {})

    def test_07__tld_wildcard(self):
        m = DomainMatcher()
        m.add('*.com', 'any-com')
        self.assertEqual(m.find('example.com'), 'any-com')
        self.assertEqual(m.find('com'), None)

    def test_08__invalid_pattern(self):
        m = DomainMatcher()
        for pattern in ['localhost', '*', '*com', '']:
            self.assertRaises(InvalidPatternError, m.add, pattern, 'x')
        self.assertEqual(m.exact_domains, {})
        self.assertEqual(m.head.children, {})
        self.assertTrue(issubclass(InvalidPatternError, ValueError))

    def test_09__non_string_input(self):
        m = DomainMatcher()
        self.assertRaises(TypeError, m.find, 123)
        self.assertRaises(TypeError, m.find, None)
        self.assertRaises(TypeError, m.add, None, 'x')
        self.assertRaises(TypeError, m.add, b'a.example.com', 'x')
        self.assertEqual(m.exact_domains, {})

    def test_10__mapping_surface(self):
        m = DomainMatcher()
        m.add('*.example.com', None)
        self.assertTrue('a.example.com' in m)
        self.assertFalse('example.com' in m)
        self.assertIsNone(m['a.example.com'])
        self.assertRaises(KeyError, lambda: m['example.com'])
        self.assertEqual(m.find('example.com', 'fallback'), 'fallback')

    def test_11__cache(self):
        m = DomainMatcher(cache_size=8)
        m.add('*.example.com', 'X')
        self.assertEqual(m.find('a.example.com'), 'X')
        m.add('a.example.com', 'exact')
        self.assertEqual(m.find('a.example.com'), 'exact')

    def test_12__logging(self):
        m = DomainMatcher()
        with self.assertLogs('addrtrie.domain.DomainMatcher',
                             level='WARNING') as cm:
            self.assertRaises(InvalidPatternError, m.add, 'localhost', 'x')
        self.assertIn('localhost', cm.output[0])

    def test_13__empty_labels_are_verbatim(self):
        m = DomainMatcher()
        m.add('*.example.com', 'X')
        self.assertEqual(m.find('.example.com'), 'X')
        self.assertEqual(m.find('example.com.'), None)
