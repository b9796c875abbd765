def test_touch_upserts_single_record(presence_registry, clock):
    presence_registry.touch(10101)
    clock.advance(5)
    record = presence_registry.touch(10101)

    assert len(presence_registry) == 1
    assert record.last_active_at == clock()


def test_list_active_excludes_requester(presence_registry):
    for rider_id in (10101, 20102, 30103):
        presence_registry.touch(rider_id)

    assert presence_registry.list_active() == [10101, 20102, 30103]
    assert presence_registry.list_active(excluding=20102) == [10101, 30103]


def test_list_active_prunes_expired(presence_registry, clock):
    presence_registry.touch(10101)
    clock.advance(400)
    presence_registry.touch(20102)
    clock.advance(300)

    assert presence_registry.list_active() == [20102]
    assert len(presence_registry) == 1


def test_touch_keeps_rider_alive(presence_registry, clock):
    presence_registry.touch(10101)
    clock.advance(500)
    presence_registry.touch(10101)
    clock.advance(500)

    assert presence_registry.list_active() == [10101]


def test_reset_all(presence_registry):
    presence_registry.touch(10101)
    presence_registry.reset_all()
    assert presence_registry.list_active() == []
