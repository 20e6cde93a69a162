import pytest
import httpx
from pokedex.clients.pokeapi_client import (
    FetchError,
    HttpStatusError,
    MalformedDataError,
    NetworkError,
    PokeAPIClient,
)
from pokedex.models import PokemonReference


MOCK_LIST_RESPONSE = {
    "count": 1302,
    "next": "https://pokeapi.co/api/v2/pokemon?offset=3&limit=3",
    "previous": None,
    "results": [
        {"name": "bulbasaur", "url": "https://pokeapi.co/api/v2/pokemon/1/"},
        {"name": "ivysaur", "url": "https://pokeapi.co/api/v2/pokemon/2/"},
        {"name": "venusaur", "url": "https://pokeapi.co/api/v2/pokemon/3/"},
    ]
}

MOCK_SPECIES = {
    "name": "mewtwo",
    "habitat": {"name": "rare"},
    "flavor_text_entries": [
        {"flavor_text": "It was created by a scientist.", "language": {"name": "en"}}
    ]
}

@pytest.fixture
def poke_client():
    """Provides a PokeAPIClient pointed at the public base URL."""
    return PokeAPIClient()

@pytest.mark.asyncio
async def test_list_pokemon_returns_references_in_order(httpx_mock, poke_client):
    """Verifies the list endpoint is called with the limit and mapped to references."""
    # ARRANGE: Mock the list endpoint, including the limit query parameter
    httpx_mock.add_response(
        url="https://pokeapi.co/api/v2/pokemon?limit=3",
        json=MOCK_LIST_RESPONSE,
        status_code=200
    )

    # ACT
    result = await poke_client.list_pokemon(3)

    # ASSERT
    assert all(isinstance(ref, PokemonReference) for ref in result)
    assert [ref.name for ref in result] == ["bulbasaur", "ivysaur", "venusaur"]
    assert result[0].url == "https://pokeapi.co/api/v2/pokemon/1/"

@pytest.mark.asyncio
async def test_list_without_results_is_malformed(httpx_mock, poke_client):
    httpx_mock.add_response(
        url="https://pokeapi.co/api/v2/pokemon?limit=3",
        json={"count": 0},
        status_code=200
    )

    with pytest.raises(MalformedDataError) as excinfo:
        await poke_client.list_pokemon(3)

    assert excinfo.value.phase == "Pokemon list"

@pytest.mark.asyncio
async def test_list_entry_without_name_is_malformed(httpx_mock, poke_client):
    httpx_mock.add_response(
        url="https://pokeapi.co/api/v2/pokemon?limit=1",
        json={"results": [{"url": "https://pokeapi.co/api/v2/pokemon/1/"}]},
        status_code=200
    )

    with pytest.raises(MalformedDataError):
        await poke_client.list_pokemon(1)

@pytest.mark.asyncio
async def test_get_pokemon_at_uses_the_reference_url(httpx_mock, poke_client):
    httpx_mock.add_response(
        url="https://pokeapi.co/api/v2/pokemon/1/",
        json={"id": 1, "name": "bulbasaur"},
        status_code=200
    )

    result = await poke_client.get_pokemon_at("https://pokeapi.co/api/v2/pokemon/1/")

    assert result["name"] == "bulbasaur"

@pytest.mark.asyncio
async def test_names_are_lowercased(httpx_mock, poke_client):
    httpx_mock.add_response(
        url="https://pokeapi.co/api/v2/pokemon-species/mewtwo",
        json=MOCK_SPECIES,
        status_code=200
    )

    result = await poke_client.get_pokemon_species("MewTwo")

    assert result["habitat"]["name"] == "rare"

@pytest.mark.asyncio
async def test_species_not_found_raises_404(httpx_mock, poke_client):
    """Test that a 404 from PokeAPI keeps its status and names the failing phase."""
    # ARRANGE: Mock the external API to return a 404 Not Found
    httpx_mock.add_response(
        url="https://pokeapi.co/api/v2/pokemon-species/nonexistent",
        status_code=404
    )

    # ACT & ASSERT
    with pytest.raises(HttpStatusError) as excinfo:
        await poke_client.get_pokemon_species("nonexistent")

    assert excinfo.value.status_code == 404
    assert excinfo.value.upstream_status == 404
    assert excinfo.value.detail == "Failed to fetch species: 404"

@pytest.mark.asyncio
async def test_pokeapi_internal_error_raises_503(httpx_mock, poke_client):
    """Test that a 500 from PokeAPI is re-mapped to a 503 that still names the upstream status."""
    httpx_mock.add_response(
        url="https://pokeapi.co/api/v2/pokemon/internalerror",
        status_code=500
    )

    with pytest.raises(HttpStatusError) as excinfo:
        await poke_client.get_pokemon("internalerror")

    assert excinfo.value.status_code == 503
    assert "500" in excinfo.value.detail
    assert isinstance(excinfo.value, FetchError)

@pytest.mark.asyncio
async def test_network_error_raises_503(httpx_mock, poke_client):
    """Tests that a network failure (timeout, DNS error) raises a NetworkError."""
    # ARRANGE: Mock a network failure (RequestError)
    httpx_mock.add_exception(
        httpx.ConnectError("Connection timed out."),
        url="https://pokeapi.co/api/v2/pokemon/pikachu"
    )

    with pytest.raises(NetworkError) as excinfo:
        await poke_client.get_pokemon("pikachu")

    assert excinfo.value.status_code == 503
    assert "network error" in excinfo.value.detail.lower()

@pytest.mark.asyncio
async def test_non_json_body_is_malformed(httpx_mock, poke_client):
    httpx_mock.add_response(
        url="https://pokeapi.co/api/v2/pokemon/pikachu",
        text="<html>maintenance</html>",
        status_code=200
    )

    with pytest.raises(MalformedDataError) as excinfo:
        await poke_client.get_pokemon("pikachu")

    assert excinfo.value.status_code == 502

@pytest.mark.httpx_mock(can_send_already_matched_responses=True)
@pytest.mark.asyncio
async def test_failed_requests_are_not_retried(httpx_mock, poke_client):
    """
    Verifies that a failing request is attempted exactly once.
    """
    call_count = [0]

    def count_and_fail(request):
        call_count[0] += 1
        return httpx.Response(status_code=500, json={"error": "Internal error"})

    httpx_mock.add_callback(
        url="https://pokeapi.co/api/v2/pokemon/mewtwo",
        callback=count_and_fail,
    )

    with pytest.raises(HttpStatusError):
        await poke_client.get_pokemon("mewtwo")

    assert call_count[0] == 1

@pytest.mark.asyncio
async def test_close_releases_the_http_client(poke_client):
    await poke_client.close()

    assert poke_client.client.is_closed
