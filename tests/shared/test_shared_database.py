import pytest
from omegaconf import OmegaConf

from fabrica.core.errors import InitializationFailure
from fabrica.shared import (
    ConnectionDescriptor,
    Database,
    EnvConnectionProvider,
    SharedContext,
    StaticConnectionProvider,
    build_shared_context,
    create_connection_provider,
    get_shared_instance,
)
from fabrica.shared.context import default_context
from _helpers import race


def test_shared_instance_is_the_same_for_all_callers():
    context = SharedContext(provider=StaticConnectionProvider("mysql://db/app", "SomeApiKey"))
    results = race(lambda: get_shared_instance(context), callers=10)
    handles = [r for r, _ in results]
    assert all(isinstance(h, Database) for h in handles)
    assert all(h is handles[0] for h in handles)
    assert handles[0].connection_info() == "URL: mysql://db/app, API: ******pKey"


def test_descriptor_is_immutable_and_masks_key():
    descriptor = ConnectionDescriptor("mysql://db/app", "secret-key")
    with pytest.raises(AttributeError):
        descriptor.url = "other"
    assert "secret" not in repr(descriptor)


def test_missing_url_fails_once_and_keeps_failing():
    context = build_shared_context(OmegaConf.create({"provider": "static", "url": None}))
    with pytest.raises(InitializationFailure) as first:
        get_shared_instance(context)
    with pytest.raises(InitializationFailure) as second:
        get_shared_instance(context)
    assert first.value is second.value
    assert isinstance(first.value.cause, ValueError)


def test_env_provider_reads_environment():
    provider = EnvConnectionProvider({"FABRICA_DB_URL": "mongodb://db", "FABRICA_DB_API_KEY": "k"})
    assert provider.describe() == ConnectionDescriptor("mongodb://db", "k")
    with pytest.raises(KeyError):
        EnvConnectionProvider({}).describe()


def test_create_connection_provider_selects_by_name():
    assert isinstance(create_connection_provider(OmegaConf.create({"provider": "env"})), EnvConnectionProvider)
    static = create_connection_provider(OmegaConf.create({"url": "mysql://x"}))
    assert isinstance(static, StaticConnectionProvider)
    with pytest.raises(ValueError):
        create_connection_provider(OmegaConf.create({"provider": "vault"}))


def test_default_context_is_a_single_holder():
    assert default_context() is default_context()
