import pytest

from transmission_client.core.casing import (
    camelize,
    camelize_keys,
    decamelize,
    decamelize_keys,
)


class TestCamelize:
    @pytest.mark.parametrize(
        "wire, expected",
        [
            ("download-dir", "downloadDir"),
            ("torrent-added", "torrentAdded"),
            ("alt-speed-time-begin", "altSpeedTimeBegin"),
            ("hash_string", "hashString"),
            ("id", "id"),
        ],
    )
    def test_wire_keys(self, wire, expected):
        assert camelize(wire) == expected

    @pytest.mark.parametrize("key", ["downloadDir", "rateDownload", "isUTP", "hashString"])
    def test_camel_keys_unchanged(self, key):
        assert camelize(key) == key

    def test_idempotent(self):
        once = camelize("seed-ratio-limit")
        assert camelize(once) == once

    def test_digit_segment_is_joined(self):
        assert camelize("a-1b") == "a1b"
        assert decamelize(camelize("a-1b")) == "a1b"

    def test_stray_separators(self):
        assert camelize("-peer--port-") == "peerPort"
        assert camelize("--") == "--"


class TestDecamelize:
    def test_camel_to_wire(self):
        assert decamelize("downloadDir") == "download-dir"
        assert decamelize("altSpeedTimeBegin") == "alt-speed-time-begin"

    def test_custom_separator(self):
        assert decamelize("peerLimit", "_") == "peer_limit"

    def test_plain_key(self):
        assert decamelize("labels") == "labels"


class TestDeepTransform:
    def test_nested_objects_and_arrays(self):
        wire = {
            "torrents": [
                {
                    "hash-string": "abc",
                    "file-stats": [{"bytes-completed": 1, "wanted": True}],
                    "peers-from": {"from-dht": 2},
                }
            ],
            "removed": [],
        }

        assert camelize_keys(wire) == {
            "torrents": [
                {
                    "hashString": "abc",
                    "fileStats": [{"bytesCompleted": 1, "wanted": True}],
                    "peersFrom": {"fromDht": 2},
                }
            ],
            "removed": [],
        }

    def test_scalars_untouched(self):
        for value in (None, True, 3, 1.5, "download-dir"):
            assert camelize_keys(value) == value

    def test_values_are_not_recased(self):
        assert camelize_keys({"fields": ["hash-string"]}) == {"fields": ["hash-string"]}

    def test_round_trip_recovers_wire_keys(self):
        wire = {
            "torrent-added": {"id": 1, "hash-string": "abc"},
            "tracker-stats": [{"seeder-count": 3, "last-announce-time": 0}],
        }

        assert decamelize_keys(camelize_keys(wire)) == wire

    def test_twice_is_same_as_once(self):
        wire = {"download-dir": "/x", "nested": [{"peer-limit": 5}]}

        once = camelize_keys(wire)
        assert camelize_keys(once) == once
