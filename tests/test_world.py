from dungeonescape.world import Monster, Room


def test_monster_fields():
    goblin = Monster("Goblin", 100, 15)
    assert (goblin.name, goblin.hp, goblin.attack) == ("Goblin", 100, 15)


def test_room_starts_empty():
    room = Room("Entrance", "You are at the entrance of the dungeon.\n")
    assert room.neighbors == []
    assert room.monster is None


def test_connect_is_symmetric():
    a, b = Room("Entrance", ""), Room("Exit", "")
    a.connect(b)
    assert a.neighbors == [b]
    assert b.neighbors == [a]


def test_connect_to_self_is_ignored():
    a = Room("Entrance", "")
    a.connect(a)
    assert a.neighbors == []


def test_connect_twice_is_ignored():
    a, b = Room("Entrance", ""), Room("Exit", "")
    a.connect(b)
    a.connect(b)
    b.connect(a)
    assert len(a.neighbors) == 1
    assert len(b.neighbors) == 1


def test_rooms_with_same_name_are_distinct():
    a, b, c = Room("X", ""), Room("X", ""), Room("X", "")
    a.connect(b)
    a.connect(c)
    assert len(a.neighbors) == 2


def test_neighbor_order_follows_connections():
    a, b, c = Room("A", ""), Room("B", ""), Room("C", "")
    a.connect(b)
    c.connect(a)
    assert [r.name for r in a.neighbors] == ["B", "C"]


def test_remove_monster():
    room = Room("Monster Lair 1", "", monster=Monster("Goblin", 100, 15))
    room.remove_monster()
    assert room.monster is None