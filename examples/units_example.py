#!/usr/bin/env python3

# Examples of quantities and unit conversion.

from pyunitlib import (Acceleration, Force, Length, Mass, Pressure,
                       Temperature, Time, Torque, Velocity, parse)


# ----------------------------------------------------------------------------

def main():
    wing_span = Length(10, 'm')
    chord = Length(1, 'm')
    wing_area = wing_span * chord
    print(f"Wing area = {wing_area} [{wing_area.to_unit('ft²'):.5g} ft²]")

    takeoff_mass = Mass(300, 'kg')
    print(f"Takeoff mass = {takeoff_mass:.5G} "
          f"[{takeoff_mass.to_unit('lb'):.5G} lb]")

    weight = takeoff_mass * Acceleration(1, 'g')
    wing_loading = weight / wing_area
    print(f"Wing loading = {wing_loading.to_unit('Pa'):.5G} Pa "
          f"[{wing_loading.to_unit('psf'):.5G} psf]")

    leg = Length(120, 'km')
    cruise = leg / Time(45, 'min')
    print(f"Cruise speed = {cruise.to_unit('km/h'):.5G} km/h "
          f"[{cruise.to_unit('kt'):.5G} kt]")

    g_accel = Acceleration(1, 'g')
    print(f"Conversion {g_accel} = {g_accel.to_unit('ft/s²'):.6G} ft/s²")

    bolt = Force(200, 'N').multiply(Length(15, 'cm'), Torque)
    print(f"Bolt torque = {bolt.to_unit('N⋅m'):.4G} N⋅m "
          f"[{bolt.to_unit('lbf⋅in'):.4G} lbf⋅in]")

    oat = Temperature(59, '°F')
    print(f"Outside air temperature {oat} = {oat.to_unit('°C'):.2f} °C "
          f"= {oat.to_unit('K'):.2f} K")

    for text in ('29.92 inHg', '1013.25 hPa', '14.696 psi'):
        p = parse(text, Pressure)
        print(f"{text} = {p.to_unit('atm'):.4f} atm")

    v = parse('250 kt', Velocity)
    print(f"{v} serialized as: {v.to_json()}")


# -----------------------------------------------------------------------------

if __name__ == "__main__":
    main()
