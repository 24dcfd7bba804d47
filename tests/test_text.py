from factboard.utils.text import MAX_FACT_LENGTH, collapse_batch, fact_key, normalize_fact


class TestNormalize:
    def test_trims(self):
        assert normalize_fact('  Cats purr.\n') == 'Cats purr.'

    def test_non_string(self):
        assert normalize_fact(None) == ''
        assert normalize_fact(42) == ''


class TestFactKey:
    def test_case_and_accent_insensitive(self):
        assert fact_key('Café au lait') == fact_key('CAFE AU LAIT ')

    def test_distinct_texts_distinct_keys(self):
        assert fact_key('Cats purr.') != fact_key('Cats hiss.')


class TestCollapseBatch:
    def test_counts_repeats_in_first_seen_order(self):
        grouped, dropped = collapse_batch(['B.', 'A.', ' B. ', 'b.', ''])
        assert list(grouped) == ['b.', 'a.']
        assert grouped['b.'] == {'text': 'B.', 'count': 3}
        assert grouped['a.'] == {'text': 'A.', 'count': 1}
        assert dropped == 1

    def test_drops_oversize(self):
        grouped, dropped = collapse_batch(['x' * (MAX_FACT_LENGTH + 1)])
        assert grouped == {}
        assert dropped == 1

    def test_key_can_outgrow_text(self):
        text = 'Straße ﬃ'
        assert fact_key(text) == 'strasse ffi'
        assert len(fact_key(text)) > len(text)
