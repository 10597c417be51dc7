from typerace.services.race import ConnectionRegistry


def test_register_and_lookup():
    reg = ConnectionRegistry()
    reg.register('sid-a', 'Alice')
    assert reg.name_of('sid-a') == 'Alice'
    assert 'sid-a' in reg
    assert len(reg) == 1


def test_unknown_connection_has_no_name():
    assert ConnectionRegistry().name_of('ghost') is None


def test_rejoin_overwrites_name():
    reg = ConnectionRegistry()
    reg.register('sid-a', 'Alice')
    reg.register('sid-a', 'Alicia')
    assert reg.name_of('sid-a') == 'Alicia'
    assert len(reg) == 1


def test_empty_and_duplicate_names_allowed():
    reg = ConnectionRegistry()
    reg.register('sid-a', 'Sam')
    reg.register('sid-b', 'Sam')
    reg.register('sid-c', '')
    assert reg.name_of('sid-b') == 'Sam'
    assert reg.name_of('sid-c') == ''
    assert len(reg) == 3


def test_remove_is_idempotent():
    reg = ConnectionRegistry()
    reg.register('sid-a', 'Alice')
    reg.remove('sid-a')
    reg.remove('sid-a')
    reg.remove('never-joined')
    assert reg.name_of('sid-a') is None
    assert len(reg) == 0
