"""
Tests for TranslationResolver: cache hit/miss, batch behaviour, stats
"""
import pytest

from translation_service.core.exceptions import BusinessRuleError, NotFoundError, ValidationError
from translation_service.models.language_value import LanguageValue
from translation_service.services.translation_resolver import TranslationResolver
from translation_service.utils.keys import generate_translation_key
from translation_service.utils.time import as_utc, utcnow

from conftest import FakeBackend, TestingSessionLocal


@pytest.fixture
def fake_backend():
    return FakeBackend(fail_on={"bad-input-that-throws"})


@pytest.fixture
def resolver(db_session, fake_backend):
    return TranslationResolver(db_session, backend=fake_backend)


def stored_values(db_session):
    db_session.expire_all()
    return db_session.query(LanguageValue).all()


def test_miss_then_hit(resolver, fake_backend, db_session, spanish):
    first = resolver.translate("Welcome", "es")
    second = resolver.translate("Welcome", "es")
    
    assert (first.translated_text, first.from_cache) == ("[ES] Welcome", False)
    assert (second.translated_text, second.from_cache) == ("[ES] Welcome", True)
    assert len(fake_backend.calls) == 1


def test_miss_stores_unapproved_record(resolver, db_session, spanish):
    resolver.translate("Welcome", "es", context={"module": "dashboard"})
    
    [value] = stored_values(db_session)
    assert value.key == generate_translation_key("Welcome", "es")
    assert value.original == "Welcome"
    assert value.destination == "[ES] Welcome"
    assert value.is_approved is False
    assert value.usage_count == 0
    assert value.context == {"module": "dashboard"}


def test_source_language_defaults_to_auto(resolver, fake_backend, spanish):
    resolver.translate("Welcome", "es")
    resolver.translate("Goodbye", "es", source_language="en")
    
    assert fake_backend.calls == [("Welcome", "auto", "es"), ("Goodbye", "en", "es")]


def test_hit_uses_seeded_record(resolver, fake_backend, db_session, spanish):
    db_session.add(LanguageValue(
        key=generate_translation_key("Welcome", "es"),
        original="Welcome",
        destination="Bienvenido",
        language_code="es",
        is_approved=True,
        usage_count=0,
    ))
    db_session.commit()
    
    result = resolver.translate("  Welcome  ", "es")
    
    assert result.translated_text == "Bienvenido"
    assert result.from_cache is True
    assert fake_backend.calls == []


def test_usage_count_grows_with_each_hit(resolver, db_session, spanish):
    resolver.translate("Save", "es")
    started = utcnow()
    
    for _ in range(3):
        assert resolver.translate("Save", "es").from_cache is True
    
    [value] = stored_values(db_session)
    assert value.usage_count == 3
    assert as_utc(value.last_used_at) >= started.replace(microsecond=0)


def test_context_does_not_split_cache(resolver, fake_backend, db_session, spanish):
    resolver.translate("Open", "es", context={"component": "menu"})
    result = resolver.translate("Open", "es", context={"component": "door"})
    
    assert result.from_cache is True
    assert len(stored_values(db_session)) == 1
    assert len(fake_backend.calls) == 1


def test_unknown_language(resolver):
    with pytest.raises(NotFoundError):
        resolver.translate("Welcome", "it")


def test_invalid_request(resolver, fake_backend, spanish):
    with pytest.raises(ValidationError) as exc_info:
        resolver.translate("", "spanish")
    
    assert len(exc_info.value.errors) == 2
    assert fake_backend.calls == []


def test_text_too_long(resolver, spanish):
    with pytest.raises(ValidationError):
        resolver.translate("x" * 5001, "es")


def test_backend_failure_propagates(resolver, db_session, spanish):
    with pytest.raises(RuntimeError):
        resolver.translate("bad-input-that-throws", "es")
    assert stored_values(db_session) == []


def test_concurrent_insert_keeps_first_record(db_session, spanish):
    class RacingBackend(FakeBackend):
        """Another writer stores the same text while the backend is working"""
        def translate(self, text, source_language, target_language):
            other = TestingSessionLocal()
            try:
                other.add(LanguageValue(
                    key=generate_translation_key(text, "es"),
                    original=text,
                    destination="Hola (other writer)",
                    language_code="es",
                    usage_count=0,
                ))
                other.commit()
            finally:
                other.close()
            return super().translate(text, source_language, target_language)
    
    resolver = TranslationResolver(db_session, backend=RacingBackend())
    result = resolver.translate("Hello", "es")
    
    assert result.translated_text == "[ES] Hello"
    assert result.from_cache is False
    values = stored_values(db_session)
    assert [v.destination for v in values] == ["Hola (other writer)"]
    assert resolver.translate("Hello", "es").translated_text == "Hola (other writer)"


def test_batch_keeps_order_and_isolates_failures(resolver, spanish):
    results = resolver.translate_batch(["a", "bad-input-that-throws", "c"], "es")
    
    assert [r.text for r in results] == ["a", "bad-input-that-throws", "c"]
    assert results[0].translated_text == "[ES] a"
    assert results[1].translated_text == "bad-input-that-throws"
    assert results[1].from_cache is False
    assert results[2].translated_text == "[ES] c"


def test_batch_uses_cache_between_items(resolver, fake_backend, spanish):
    results = resolver.translate_batch(["Yes", "Yes", "No"], "es")
    
    assert [r.from_cache for r in results] == [False, True, False]
    assert len(fake_backend.calls) == 2


def test_batch_invalid_item_echoes_text(resolver, spanish):
    results = resolver.translate_batch(["ok", "   "], "es")
    
    assert results[1].translated_text == "   "
    assert results[1].from_cache is False


def test_batch_cap_rejected_before_backend(resolver, fake_backend, spanish):
    with pytest.raises(BusinessRuleError):
        resolver.translate_batch([f"text {i}" for i in range(101)], "es")
    assert fake_backend.calls == []


def test_batch_of_exactly_cap_is_accepted(resolver, spanish):
    results = resolver.translate_batch([f"text {i}" for i in range(100)], "es")
    assert len(results) == 100


def test_empty_batch_rejected(resolver, spanish):
    with pytest.raises(ValidationError):
        resolver.translate_batch([], "es")


def test_batch_unknown_language_fails_whole_batch(resolver, fake_backend):
    with pytest.raises(NotFoundError):
        resolver.translate_batch(["a"], "it")
    assert fake_backend.calls == []


def test_stats(resolver, db_session, spanish):
    resolver.translate_batch(["one", "two", "three", "four"], "es")
    values = stored_values(db_session)
    values[0].is_approved = True
    db_session.commit()
    
    stats = resolver.get_translation_stats("es")
    
    assert stats == {
        "total_translations": 4,
        "approved_translations": 1,
        "pending_translations": 3,
        "cache_hit_rate": 25.0,
    }


def test_stats_without_approved(resolver, spanish):
    resolver.translate("one", "es")
    assert resolver.get_translation_stats("es")["cache_hit_rate"] == 0.0


def test_stats_unknown_language(resolver):
    with pytest.raises(NotFoundError):
        resolver.get_translation_stats("zz")
