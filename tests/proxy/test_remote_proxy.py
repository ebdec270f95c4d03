"""Tests for the caching remote proxy."""

import pytest

from lld_app.proxy.remote import DataServiceProxy, RealDataService


class TestDataServiceProxy:
    """Remote calls happen once; failures fall back to the cache."""

    def test_fetches_once(self):
        real = RealDataService()
        proxy = DataServiceProxy(real)

        assert proxy.get_data() == "Data from server"
        assert proxy.get_data() == "Data from server"
        assert real.calls == 1

    def test_refresh_fetches_again(self):
        responses = iter(["v1", "v2"])
        real = RealDataService(fetcher=lambda: next(responses))
        proxy = DataServiceProxy(real)

        assert proxy.get_data() == "v1"
        assert proxy.get_data(refresh=True) == "v2"
        assert real.calls == 2

    def test_invalidate(self):
        real = RealDataService()
        proxy = DataServiceProxy(real)
        proxy.get_data()
        proxy.invalidate()
        proxy.get_data()
        assert real.calls == 2

    def test_stale_cache_served_when_remote_fails(self):
        state = {"down": False}

        def fetch():
            if state["down"]:
                raise ConnectionError("server unreachable")
            return "cached payload"

        proxy = DataServiceProxy(RealDataService(fetcher=fetch))
        proxy.get_data()

        state["down"] = True
        assert proxy.get_data(refresh=True) == "cached payload"

    def test_failure_without_cache_propagates(self):
        def fetch():
            raise ConnectionError("server unreachable")

        proxy = DataServiceProxy(RealDataService(fetcher=fetch))
        with pytest.raises(ConnectionError):
            proxy.get_data()
