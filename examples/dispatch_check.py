import time

import pestledger


def main() -> None:
    server = pestledger.run(port=57794, new_server=True)

    owner = server.client("acme-facilities")
    admin = server.client(pestledger.LEDGER.admin.get_admin())

    facility = owner.register_facility(
        "Office Building",
        "123 Main St, Anytown, USA",
        5000,
        "commercial",
        "John Doe",
        "john@example.com",
    )
    print("facility", facility)

    height = admin.current_height()
    tech = admin.register_technician("Jane Smith", "PCO-12345", height + 1000, ["general", "rodent", "termite"], "jane")
    print("technician", tech)

    # A dispatcher schedules work only if both registries agree.
    jane = server.client("jane")
    can_dispatch = facility.ok and owner.get_facility(facility.value) is not None and jane.is_verified_technician(tech.value)
    print("dispatch allowed:", can_dispatch)

    admin.update_technician_status(tech.value, False)
    print("after suspension:", jane.is_verified_technician(tech.value))

    try:
        while True:
            time.sleep(3600)
    except KeyboardInterrupt:
        server.stop()


if __name__ == "__main__":
    main()
