"""Reference engine behind the status-code boundary.

The engine owns the calendar and ephemeris arithmetic: civil (UTC) conversions, leap seconds,
ΔT, the scale bijections around the Julian Date hub, quantity units and period validation.
Wrappers in :mod:`tempoch.time` only talk to it through :mod:`.api` and the fixed layouts in
:mod:`.layout`, and pass every returned status through :func:`.checkStatus`.
"""
