from nebula4x.date import Date
from nebula4x.entities import INVALID_ID, Colony, Faction, Ship
from nebula4x.game_state import ContentDB, GameState, TechDef, allocate_id
from nebula4x.orders import ShipOrders, WaitDays


def test_allocate_id_starts_at_one():
    state = GameState()
    assert allocate_id(state) == 1
    assert state.next_id == 2


def test_allocate_id_is_sequential_and_unique():
    state = GameState(next_id=40)
    ids = [allocate_id(state) for _ in range(5)]
    assert ids == list(range(40, 45))
    assert state.next_id == 45
    assert len(set(ids)) == len(ids)


def test_allocated_ids_never_collide_with_invalid():
    state = GameState()
    ids = {allocate_id(state) for _ in range(10)}
    assert INVALID_ID not in ids


def test_game_state_defaults():
    state = GameState()
    assert state.save_version == 12
    assert state.date == Date(0)
    assert state.next_event_seq == 1
    assert state.selected_system == INVALID_ID
    assert state.ships == {} and state.events == []


def test_game_states_do_not_share_containers():
    a = GameState()
    b = GameState()
    sid = allocate_id(a)
    a.ships[sid] = Ship(id=sid, name="Alpha")
    a.ship_orders[sid] = ShipOrders(queue=[WaitDays(2)])
    assert b.ships == {}
    assert b.ship_orders == {}


def test_nested_defaults_are_independent():
    c1 = Colony()
    c2 = Colony()
    c1.minerals["Duranium"] = 5.0
    assert c2.minerals == {}
    assert c1.population_millions == 100.0

    f1 = Faction()
    f2 = Faction()
    f1.discovered_systems.append(3)
    assert f2.discovered_systems == []


def test_content_db_holds_techs_independently():
    a = ContentDB()
    b = ContentDB()
    a.techs["tech_a"] = TechDef(id="tech_a", name="Tech A", cost=10.0)
    assert "tech_a" not in b.techs
    assert a.techs["tech_a"].prereqs == []