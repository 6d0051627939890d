import pytest

from ledgenet.gamecore.actors import Player
from ledgenet.gamecore.datamodel import DataModel
from ledgenet.gamecore.playerlist import PlayerList
from ledgenet.gamecore.world import World


def test_init_registers_services():
    model = DataModel()
    model.init()
    assert model.has_service("World")
    assert model.has_service("PlayerList")
    assert isinstance(model.get_service("World"), World)
    assert isinstance(model.get_service("PlayerList"), PlayerList)


def test_services_know_their_provider():
    model = DataModel()
    model.init()
    assert model.world.provider is model
    assert model.player_list.provider is model


def test_world_missing_before_init():
    model = DataModel()
    assert not model.has_service("World")
    assert not model.has_service("PlayerList")
    with pytest.raises(KeyError):
        model.world


def test_players_reach_the_world():
    model = DataModel()
    model.init()
    player = Player(network_owner=5)
    model.player_list.add_player(player)
    assert model.world.actors == [player]


def test_properties_return_registered_services():
    model = DataModel()
    model.init()
    assert model.world is model.get_service("World")
    assert model.player_list is model.get_service("PlayerList")