"""Tests for Janome-backed reading resolution."""
import pytest
from unittest.mock import Mock, patch
from ke2daira.nlp.japanese.reading import JanomeReadingResolver


def make_token(surface, reading, part_of_speech="名詞,固有名詞,人名,姓,*,*"):
    return Mock(surface=surface, reading=reading, part_of_speech=part_of_speech)


class TestJanomeReadingResolverMocked:
    """Test token handling with a mocked Janome tokenizer."""

    @pytest.fixture
    def mock_tokenizer(self):
        with patch('ke2daira.nlp.japanese.reading.Tokenizer') as mock_class:
            instance = Mock()
            mock_class.return_value = instance
            yield mock_class, instance

    def test_tokenizer_created_lazily_once(self, mock_tokenizer):
        mock_class, instance = mock_tokenizer
        instance.tokenize.return_value = [make_token("健", "ケン")]

        resolver = JanomeReadingResolver(user_dict="")
        mock_class.assert_not_called()

        resolver.reading_of("健")
        resolver.reading_of("健")
        mock_class.assert_called_once_with()

    def test_user_dictionary_passed_to_janome(self, mock_tokenizer):
        mock_class, instance = mock_tokenizer
        instance.tokenize.return_value = []

        resolver = JanomeReadingResolver(user_dict="names.csv", user_dict_encoding="utf8")
        resolver.reading_of("健")
        mock_class.assert_called_once_with("names.csv", udic_enc="utf8")

    def test_concatenates_token_readings(self, mock_tokenizer):
        _, instance = mock_tokenizer
        instance.tokenize.return_value = [
            make_token("山", "ヤマ"),
            make_token("田", "ダ"),
        ]

        resolver = JanomeReadingResolver(user_dict="")
        assert resolver.reading_of("山田") == "ヤマダ"
        instance.tokenize.assert_called_with("山田", wakati=False)

    def test_unknown_tokens_are_skipped(self, mock_tokenizer):
        _, instance = mock_tokenizer
        instance.tokenize.return_value = [
            make_token("彁", "*", "名詞,一般,*,*,*,*"),
            make_token("健", "ケン"),
        ]

        resolver = JanomeReadingResolver(user_dict="")
        assert resolver.reading_of("彁健") == "ケン"

    def test_no_known_token_means_no_reading(self, mock_tokenizer):
        _, instance = mock_tokenizer
        instance.tokenize.return_value = [make_token("彁", "*", "名詞,一般,*,*,*,*")]

        resolver = JanomeReadingResolver(user_dict="")
        assert resolver.reading_of("彁") is None

    def test_symbols_are_skipped(self, mock_tokenizer):
        _, instance = mock_tokenizer
        instance.tokenize.return_value = [
            make_token("健", "ケン"),
            make_token("・", "・", "記号,一般,*,*,*,*"),
        ]

        resolver = JanomeReadingResolver(user_dict="")
        assert resolver.reading_of("健・") == "ケン"

    def test_unknown_hiragana_reads_as_written(self, mock_tokenizer):
        _, instance = mock_tokenizer
        instance.tokenize.return_value = [make_token("ぴえん", "*", "名詞,一般,*,*,*,*")]

        resolver = JanomeReadingResolver(user_dict="")
        assert resolver.reading_of("ぴえん") == "ピエン"

    def test_non_katakana_reading_is_rejected(self, mock_tokenizer):
        _, instance = mock_tokenizer
        instance.tokenize.return_value = [make_token("Ａ", "エーＡ")]

        resolver = JanomeReadingResolver(user_dict="")
        assert resolver.reading_of("Ａ") is None

    def test_callable(self, mock_tokenizer):
        _, instance = mock_tokenizer
        instance.tokenize.return_value = [make_token("健", "ケン")]

        resolver = JanomeReadingResolver(user_dict="")
        assert resolver("健") == "ケン"


class TestJanomeReadingResolverDictionary:
    """Test against the real IPADIC dictionary bundled with Janome."""

    @pytest.fixture(scope="class")
    def resolver(self):
        return JanomeReadingResolver(user_dict="")

    def test_surname(self, resolver):
        assert resolver.reading_of("松平") == "マツダイラ"

    def test_given_name(self, resolver):
        assert resolver.reading_of("健") == "ケン"

    def test_ghost_character(self, resolver):
        assert resolver.reading_of("彁") is None
