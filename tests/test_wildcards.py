"""Tests for the wildcard shortfall policy."""

from arenadeck.models.collection import OwnedCollection
from arenadeck.services.card_database import CardDatabase
from arenadeck.services.wildcards import get_wildcards_missing, wildcard_policy


class TestGetWildcardsMissing:
    def test_nothing_owned(self, card_db: CardDatabase) -> None:
        assert get_wildcards_missing(2, 4, OwnedCollection(), card_db) == 4

    def test_partially_owned(self, card_db: CardDatabase) -> None:
        collection = OwnedCollection(cards={2: 3})
        assert get_wildcards_missing(2, 4, collection, card_db) == 1

    def test_owned_enough(self, card_db: CardDatabase) -> None:
        collection = OwnedCollection(cards={2: 4})
        assert get_wildcards_missing(2, 2, collection, card_db) == 0

    def test_reprints_count_as_owned(self, card_db: CardDatabase) -> None:
        collection = OwnedCollection(cards={6: 1, 7: 1})
        assert get_wildcards_missing(7, 4, collection, card_db) == 2

    def test_quantity_capped_at_max_copies(self, card_db: CardDatabase) -> None:
        assert get_wildcards_missing(1, 10, OwnedCollection(), card_db) == 4

    def test_basic_lands_are_free(self, card_db: CardDatabase) -> None:
        assert get_wildcards_missing(3, 20, OwnedCollection(), card_db) == 0

    def test_tokens_are_free(self, card_db: CardDatabase) -> None:
        assert get_wildcards_missing(8, 1, OwnedCollection(), card_db) == 0


class TestWildcardPolicy:
    def test_binds_collection(self, card_db: CardDatabase) -> None:
        policy = wildcard_policy(OwnedCollection(cards={1: 1}), card_db)
        assert policy(1, 4) == 3
        assert policy(4, 2) == 2


class TestOwnedCountClamping:
    def test_negative_owned_counts_as_none(self, card_db: CardDatabase) -> None:
        collection = OwnedCollection(cards={2: -10})
        assert get_wildcards_missing(2, 4, collection, card_db) == 4

    def test_negative_reprint_count_ignored(self, card_db: CardDatabase) -> None:
        collection = OwnedCollection(cards={6: -3, 7: 2})
        assert get_wildcards_missing(7, 4, collection, card_db) == 2
