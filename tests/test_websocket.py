def events(socket_client, name):
    return [message['args'][0] for message in socket_client.get_received() if message['name'] == name]


def test_join_game_sends_state(socket_client, game_service):
    game_id = game_service.create_new_game(answer="haste")

    socket_client.emit('join_game', {'game_id': game_id})

    states = events(socket_client, 'game_state')
    assert len(states) == 1
    assert states[0]['state']['game_id'] == game_id


def test_join_unknown_game(socket_client):
    socket_client.emit('join_game', {'game_id': 'missing'})

    errors = events(socket_client, 'error')
    assert errors == [{'error': 'Game not found', 'game_id': 'missing'}]


def test_game_id_required(socket_client):
    socket_client.emit('submit_guess', {'guess': 'heart'})

    assert events(socket_client, 'error') == [{'error': 'Game ID is required'}]


def test_guess_broadcast_to_room(app, socket_client, game_service):
    game_id = game_service.create_new_game(answer="haste")
    watcher = app.socketio.test_client(app)
    watcher.emit('join_game', {'game_id': game_id})
    socket_client.emit('join_game', {'game_id': game_id})
    watcher.get_received()
    socket_client.get_received()

    socket_client.emit('submit_guess', {'game_id': game_id, 'guess': 'heart'})

    for client in (socket_client, watcher):
        results = events(client, 'guess_result')
        assert len(results) == 1
        assert results[0]['success'] is True
        assert results[0]['state']['guesses'] == ['heart']

    watcher.disconnect()


def test_rejected_guess_only_reaches_sender(socket_client, game_service):
    game_id = game_service.create_new_game(answer="haste")
    socket_client.emit('join_game', {'game_id': game_id})
    socket_client.get_received()

    socket_client.emit('submit_guess', {'game_id': game_id, 'guess': 'zzzzz'})

    results = events(socket_client, 'guess_result')
    assert results[0]['success'] is False
    assert results[0]['result'] == 'NOT_IN_DICTIONARY'


def test_winning_guess_ends_game(socket_client, game_service):
    game_id = game_service.create_new_game(answer="haste")
    socket_client.emit('join_game', {'game_id': game_id})
    socket_client.get_received()

    socket_client.emit('submit_guess', {'game_id': game_id, 'guess': 'haste'})

    ended = events(socket_client, 'game_ended')
    assert ended == [{'game_id': game_id, 'status': 'WON', 'answer': 'haste'}]


def test_leave_game_stops_updates(socket_client, game_service):
    game_id = game_service.create_new_game(answer="haste")
    socket_client.emit('join_game', {'game_id': game_id})
    socket_client.emit('leave_game', {'game_id': game_id})
    socket_client.get_received()

    socket_client.emit('submit_guess', {'game_id': game_id, 'guess': 'heart'})

    assert events(socket_client, 'guess_result') == []
    assert game_service.get_game_state(game_id).guesses == ['heart']


def test_join_game_deleted_before_lookup(socket_client, game_service, monkeypatch):
    game_id = game_service.create_new_game(answer="haste")
    monkeypatch.setattr(game_service, 'get_game_state', lambda _game_id: None)

    socket_client.emit('join_game', {'game_id': game_id})

    received = socket_client.get_received()
    assert [m['name'] for m in received] == ['error']
    assert received[0]['args'][0] == {'error': 'Game not found', 'game_id': game_id}
