from bus_reservation.reservation.handlers.cli import main

if __name__ == "__main__":
    main()
