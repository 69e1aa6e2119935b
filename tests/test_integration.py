"""End-to-end integration tests against the live transport.opendata.ch API."""

import pytest

from opendata_transport.adapters.transport_api import OpendataTransportClient
from opendata_transport.domain.models import (
    ConnectionsQuery,
    QueryType,
    StationboardQuery,
)


@pytest.mark.integration
@pytest.mark.asyncio
async def test_live_location_search_finds_zurich_hb() -> None:
    """Test that a station search for Zürich HB returns it first."""
    async with OpendataTransportClient() as client:
        result = await client.locations("Zürich HB", QueryType.STATION)

    assert result.stations, "Should find at least one station"
    assert result.stations[0].id == "8503000"


@pytest.mark.integration
@pytest.mark.asyncio
async def test_live_connections_have_sections() -> None:
    """Test that a connection search returns itineraries made of sections."""
    async with OpendataTransportClient() as client:
        result = await client.connections(ConnectionsQuery(from_="Bern", to="Basel SBB", limit=2))

    assert result.connections, "Should find at least one connection"
    for connection in result.connections:
        assert connection.sections, f"Connection should have sections, got: {connection}"
        for section in connection.sections:
            assert section.is_journey or section.is_walk


@pytest.mark.integration
@pytest.mark.asyncio
async def test_live_stationboard_lists_departures() -> None:
    """Test that the station board of Bern lists departures."""
    async with OpendataTransportClient() as client:
        result = await client.stationboard(StationboardQuery(station="Bern"))

    assert result.stationboard, "Should list at least one departure"
    print(f"First departure: {result.stationboard[0].name} to {result.stationboard[0].to}")
