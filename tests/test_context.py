"""Tests for the context classifier."""

from contentguard.catalog import CatalogDocument, TermCatalog
from contentguard.moderation.context import ContextClassifier, ContextSignals


def _classifier() -> ContextClassifier:
    return ContextClassifier(
        TermCatalog(
            CatalogDocument(
                book_whitelist=["killer plot"],
                book_titles_whitelist=["To Kill a Mockingbird"],
            )
        )
    )


def test_book_title_context():
    classifier = _classifier()
    assert classifier.is_book_context("Just finished TO KILL A MOCKINGBIRD again")
    assert classifier.is_book_context("What a killer plot!")
    assert not classifier.is_book_context("I will kill the next chapter")


def test_friendly_banter():
    assert ContextClassifier.is_friendly_banter("haha you got me")
    assert ContextClassifier.is_friendly_banter("no offense but the ending was weak")
    assert ContextClassifier.is_friendly_banter("you nerd \U0001F602")
    assert not ContextClassifier.is_friendly_banter("Great read.")


def test_self_deprecation_needs_both_parts():
    assert ContextClassifier.is_self_deprecating("I'm such an idiot")
    assert ContextClassifier.is_self_deprecating("silly me, so dumb")
    assert not ContextClassifier.is_self_deprecating("You are an idiot")
    assert not ContextClassifier.is_self_deprecating("I loved it")


def test_targeted_attack():
    assert ContextClassifier.is_targeted_attack("you're an idiot")
    assert ContextClassifier.is_targeted_attack("You are a loser")
    assert ContextClassifier.is_targeted_attack("just go die")
    assert ContextClassifier.is_targeted_attack("fuuuck you")
    assert not ContextClassifier.is_targeted_attack("the idiot protagonist annoyed me")


def test_classify_collects_all_signals():
    signals = _classifier().classify("I'm so stupid lol, you're a fool")
    assert signals == ContextSignals(
        book_context=False,
        friendly_banter=True,
        self_deprecating=True,
        targeted_attack=True,
    )
