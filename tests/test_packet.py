import struct

import pytest

from usblview.packet import (
    END_MARKER,
    POSFIER_PACKET_LEN,
    POSITION_TAG,
    POSITION_TAG_OFFSET,
    PACKET_SIZE,
    RAY_PACKET_LEN,
    RECORD_LENGTH,
    START_MARKER,
    UploadComplexPacket,
    decode_double,
)


def _sample() -> UploadComplexPacket:
    return UploadComplexPacket(
        beacon_index=3,
        status=1,
        peak_num=tuple(range(9)),
        noise=tuple(-i for i in range(9)),
        time_delay=tuple(i * 0.5 for i in range(9)),
        variance=(0.25, 0.75),
        depth=12.5,
        gps_time=bytes(range(8)),
        longitude=120.5,
        latitude=36.25,
        altitude=-3.0,
        nsew=b"NE",
        array_coordinate=(1.5, -2.5, 3.75),
        slant_range=42.0,
        magnify=-3,
        compass_num=2,
        parameter_wrap=(1.0, 2.0, 3.0, 4.0, 5.0, 6.0),
        abs_snr=-7,
        angle_threshold=9.5,
    )


def test_record_length_matches_read_buffer():
    encoded = UploadComplexPacket().to_bytes()
    assert len(encoded) + RAY_PACKET_LEN + POSFIER_PACKET_LEN == RECORD_LENGTH
    assert RECORD_LENGTH == 1108


def test_default_packet_has_markers():
    data = UploadComplexPacket().to_bytes()
    assert len(data) == PACKET_SIZE
    assert data[:4] == START_MARKER
    assert data[POSITION_TAG_OFFSET:POSITION_TAG_OFFSET + 3] == POSITION_TAG
    assert data[-2:] == END_MARKER


def test_round_trip_preserves_fields():
    packet = _sample()
    decoded = UploadComplexPacket.from_bytes(packet.to_bytes())
    assert decoded == packet
    assert decoded.magnify == -3
    assert decoded.array_coordinate == (1.5, -2.5, 3.75)


def test_bytes_round_trip():
    data = _sample().to_bytes()
    assert UploadComplexPacket.from_bytes(data).to_bytes() == data


def test_array_coordinate_encoded_little_endian():
    data = _sample().to_bytes()
    assert struct.pack("<3d", 1.5, -2.5, 3.75) in data


def test_from_bytes_rejects_wrong_length():
    with pytest.raises(ValueError):
        UploadComplexPacket.from_bytes(bytes(PACKET_SIZE - 1))


def test_to_bytes_rejects_wrong_sequence_length():
    with pytest.raises(ValueError):
        UploadComplexPacket(array_coordinate=(1.0, 2.0)).to_bytes()


def test_to_bytes_rejects_wrong_header_length():
    with pytest.raises(ValueError):
        UploadComplexPacket(header=b"$HEU").to_bytes()


def test_to_bytes_rejects_out_of_range_byte():
    with pytest.raises(ValueError):
        UploadComplexPacket(status=300).to_bytes()


def test_decode_double_values():
    assert decode_double(struct.pack("<d", -2.25)) == -2.25
    assert decode_double(bytes(8)) == 0.0
    assert decode_double(b"\x00" * 6 + b"\xf0\x3f") == 1.0


def test_decode_double_rejects_wrong_length():
    with pytest.raises(ValueError):
        decode_double(bytes(7))