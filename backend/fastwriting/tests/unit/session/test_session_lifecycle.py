import asyncio

from fastwriting.tests.mocks.connection import MockConnection, drain


class TestCloseSession:
    async def test_close_removes_session_and_stops_timers(self, manager, connection):
        player = await manager.open_session(connection)
        await manager.close_session(connection)

        assert manager.session_count == 0
        assert manager.get_session(connection.connection_id) is None
        assert player.game.scheduler.pending_count == 0
        assert player.sender.done()

    async def test_close_unknown_connection_is_noop(self, manager, connection):
        await manager.close_session(connection)
        assert manager.session_count == 0

    async def test_unsubscribed_game_no_longer_queues(self, manager, connection):
        player = await manager.open_session(connection)
        await drain(connection)
        await manager.close_session(connection)
        player.game.restart()
        assert player.outbox.empty()


class TestShutdown:
    async def test_shutdown_closes_every_session(self, manager):
        connections = [MockConnection() for _ in range(3)]
        players = [await manager.open_session(conn) for conn in connections]

        await manager.shutdown()

        assert manager.session_count == 0
        for player in players:
            assert player.sender.done()
            assert player.game.scheduler.pending_count == 0


class TestSendFailure:
    async def test_send_failure_stops_game(self, manager, connection):
        player = await manager.open_session(connection)
        await drain(connection)

        connection.fail_sends = True
        player.game.scheduler.advance(1.0)
        await asyncio.wait_for(player.sender, timeout=1.0)

        assert player.game.scheduler.pending_count == 0
        await manager.close_session(connection)
        assert manager.session_count == 0
