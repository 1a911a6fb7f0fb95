"""Business-logic layer: build domain payloads from collaborators and validate them.

- system_service.py (host metrics -> SystemInfo)
- weather_service.py (weather collaborator -> WeatherInfo | None)
"""

# Import side-effects are intentionally avoided here; modules are imported by routers as needed.
