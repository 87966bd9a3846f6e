import unittest

from weather_risk.data_sources.base import CallableWeatherDataSource, StaticWeatherDataSource
from weather_risk.data_sources.factory import DEFAULT_SOURCE_NAME, build_data_source
from weather_risk.normalizer import normalize


class DummySettings:
    def __init__(self, **kwargs):
        for k, v in kwargs.items():
            setattr(self, k, v)
        self.weather_source = getattr(self, "weather_source", DEFAULT_SOURCE_NAME)
        self.openweathermap_api_key = getattr(self, "openweathermap_api_key", None)


class TestDataSourceFactory(unittest.TestCase):
    def test_build_openweathermap_default(self):
        ds = build_data_source(DummySettings(openweathermap_api_key="k"))
        self.assertIsInstance(ds, CallableWeatherDataSource)

    def test_build_mock_source(self):
        ds = build_data_source(DummySettings(weather_source="MOCK"))
        self.assertIsInstance(ds, StaticWeatherDataSource)
        raw = ds.fetch_current_weather(10.0, 20.0)
        self.assertEqual(raw["coord"], {"lat": 10.0, "lon": 20.0})
        obs = normalize(raw)
        self.assertEqual(obs.temperature_c, 25.0)
        self.assertEqual(obs.wind_speed_ms, 3.5)

    def test_static_source_returns_copies(self):
        ds = StaticWeatherDataSource()
        first = ds.fetch_current_weather(0, 0)
        first["temperature"] = -99
        self.assertEqual(ds.fetch_current_weather(0, 0)["temperature"], 25)

    def test_callable_source_delegates(self):
        calls = []
        ds = CallableWeatherDataSource(current_weather=lambda lat, lon: calls.append((lat, lon)) or {"ok": True})
        self.assertEqual(ds.fetch_current_weather(1.5, 2.5), {"ok": True})
        self.assertEqual(calls, [(1.5, 2.5)])

    def test_unknown_source_raises(self):
        with self.assertRaises(ValueError):
            build_data_source(DummySettings(weather_source="unknown-source"))


if __name__ == "__main__":
    unittest.main()
