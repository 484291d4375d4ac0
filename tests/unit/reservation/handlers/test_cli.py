from unittest.mock import MagicMock

import pytest

from bus_reservation.reservation.handlers.cli import ReservationCli
from bus_reservation.shared.config import Settings


class ScriptedConsole:
    """入力を順に返し、出力を記録するコンソール"""

    def __init__(self, inputs: list[str]) -> None:
        self._inputs = iter(inputs)
        self.lines: list[str] = []

    def read(self, prompt: str) -> str:
        try:
            return next(self._inputs)
        except StopIteration:
            raise EOFError from None

    def write(self, text: str) -> None:
        self.lines.append(text)

    @property
    def output(self) -> str:
        return "\n".join(self.lines)


@pytest.fixture
def run_cli(registry):
    """入力を流して CLI を実行し、コンソールとロガーを返す"""

    def _run(inputs: list[str], seed: bool = False):
        console = ScriptedConsole(inputs)
        logger = MagicMock()
        cli = ReservationCli(
            registry=registry,
            settings=Settings(bus_capacity=10),
            logger=logger,
            read=console.read,
            write=console.write,
        )
        if seed:
            cli.seed()
        cli.run()
        return console, logger

    return _run


CREATE_T1 = ["1", "T1", "İstanbul", "Ankara", "2025-11-03 09:00", "100"]


class TestReservationCli:
    """ReservationCli のテスト"""

    def test_exit(self, run_cli):
        """0 を選ぶと終了メッセージを表示して終わる"""
        console, _ = run_cli(["0"])
        assert "Exiting. Have a nice day!" in console.output

    def test_end_of_input_exits(self, run_cli):
        """入力終端でも終了する"""
        console, _ = run_cli([])
        assert console.lines[-1] == "Exiting. Have a nice day!"

    def test_invalid_choice(self, run_cli):
        """メニューにない選択はメッセージを表示して続行する"""
        console, _ = run_cli(["9", "0"])
        assert "Invalid choice. Please try again." in console.output

    def test_create_and_list_trip(self, run_cli, registry):
        """便を作成して一覧に表示する"""

        # Act
        console, logger = run_cli([*CREATE_T1, "2", "0"])

        # Assert
        assert "Trip created: T1" in console.output
        assert "T1 | İstanbul -> Ankara | Departure: 03/11/2025 09:00" in console.output
        assert registry.get_trip("T1").capacity == 10
        logger.info.assert_any_call("Trip created", extra={"trip_id": "T1"})

    def test_create_trip_with_existing_id(self, run_cli, registry):
        """既存の便IDでは作成しない"""
        console, _ = run_cli([*CREATE_T1, "1", "T1", "0"])
        assert "Invalid or existing trip ID." in console.output
        assert registry.trip_count() == 1

    def test_create_trip_with_bad_date_does_not_touch_registry(self, run_cli, registry):
        """不正な出発日時ではコアを呼び出さず、警告を記録する"""

        # Act
        console, logger = run_cli(["1", "T1", "A", "B", "03.11.2025", "100", "0"])

        # Assert
        assert "Invalid input: departure_time:" in console.output
        assert registry.get_trip("T1") is None
        logger.warning.assert_called_once()

    def test_reserve_seat_prints_ticket(self, run_cli, registry):
        """予約すると予約IDと予約票を表示する"""

        # Act
        console, _ = run_cli(
            [*CREATE_T1, "4", "T1", "3", "Ali Yılmaz", "05330001111", "0"]
        )

        # Assert
        seat = registry.get_trip("T1").get_seat(3)
        assert seat.reserved is True
        assert f"Reservation completed! Reservation ID: {seat.reservation_id}" in (
            console.output
        )
        assert "Seat No        : 03" in console.output
        assert "Ticket Price   : 100 TL" in console.output

    def test_reserve_non_numeric_seat_number(self, run_cli, registry):
        """数字でない座席番号では予約しない"""

        # Act
        console, _ = run_cli([*CREATE_T1, "4", "T1", "three", "Ali", "0533", "0"])

        # Assert
        assert "Invalid input: seat_number:" in console.output
        assert registry.total_reserved_seats() == 0

    def test_reserve_taken_seat(self, run_cli):
        """予約済みの座席は予約できない"""
        console, _ = run_cli(
            [
                *CREATE_T1,
                "4", "T1", "3", "Ali Yılmaz", "05330001111",
                "4", "T1", "3", "Zeynep Demir", "05330002222",
                "0",
            ]
        )
        assert "Reservation failed (seat taken or invalid seat number)." in (
            console.output
        )

    def test_reserve_on_unknown_trip(self, run_cli):
        """存在しない便への予約は便が見つからない旨を表示する"""
        console, _ = run_cli(["4", "missing", "0"])
        assert "Trip not found." in console.output

    def test_cancel_reservation(self, run_cli, registry):
        """予約を取り消し、予約と取り消しのドメインイベントを記録する"""

        # Act
        console, logger = run_cli(
            [
                *CREATE_T1,
                "4", "T1", "3", "Ali Yılmaz", "05330001111",
                "5", "00000001-0000-4000-8000-000000000000",
                "0",
            ]
        )

        # Assert
        assert "Cancelling: Trip T1 | Seat 3 | Passenger Ali Yılmaz" in console.output
        assert "Reservation cancelled." in console.output
        assert registry.total_reserved_seats() == 0
        events = [
            call.kwargs["extra"]["event"]
            for call in logger.info.call_args_list
            if call.args == ("Domain event",)
        ]
        assert events == ["SeatReserved", "ReservationCancelled"]

    def test_cancel_unknown_reservation(self, run_cli):
        """未知の予約IDは見つからない旨を表示する"""
        console, _ = run_cli(["5", "nope", "0"])
        assert "Reservation ID not found." in console.output

    def test_trip_details_show_short_reservation_id(self, run_cli):
        """座席表には短縮した予約IDを表示する"""

        # Act
        console, _ = run_cli(
            [*CREATE_T1, "4", "T1", "2", "Ali Yılmaz", "0533", "3", "T1", "0"]
        )

        # Assert
        assert "01 : FREE" in console.output
        assert "02 : TAKEN [00000001] - Ali Yılmaz" in console.output

    def test_occupancy_for_one_trip(self, run_cli):
        """1 便の乗車率・売上と座席一覧を表示する"""

        # Act
        console, _ = run_cli(
            [*CREATE_T1, "4", "T1", "2", "Ali Yılmaz", "0533", "6", "T1", "0"]
        )

        # Assert
        assert "Reserved: 1/10 (10.00%) | Revenue: 100 TL" in console.output
        assert "Available seats: 1, 3, 4, 5, 6, 7, 8, 9, 10" in console.output
        assert "Reserved seats: 2" in console.output

    def test_list_reservations_when_empty(self, run_cli):
        """予約が無い場合はその旨を表示する"""
        console, _ = run_cli(["7", "0"])
        assert "No reservations yet." in console.output

    def test_seed_and_summary(self, run_cli):
        """サンプルデータの予約票 10 枚と集計レポートを表示する"""

        # Act
        console, _ = run_cli(["8", "0"], seed=True)

        # Assert
        assert console.output.count("               TICKET") == 10
        assert "Total trips: 5" in console.output
        assert "Total reserved seats: 10" in console.output
        assert "Total revenue: 4310 TL" in console.output
