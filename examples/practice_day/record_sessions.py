#!/usr/bin/env python3
"""
Practice Day Example

This example demonstrates how to:
1. Generate lap times for several drivers
2. Fill a session store up to its capacity
3. Compute per-session and overall averages
4. Write a report covering every stored session

Run with: python record_sessions.py
"""

from racelog import SessionStore, VehicleCategory, average_lap, overall_average
from racelog.scoring import GeneratorConfig, LapTimeGenerator
from racelog.report import ReportExporter, ExporterConfig


ENTRIES = [
    ("Hamilton", "Silverstone", VehicleCategory.FORMULA),
    ("Rossi", "Monza", VehicleCategory.GT3),
    ("Loeb", "Rally Finland", VehicleCategory.RALLY),
    ("Vettel", "Spa", VehicleCategory.FORMULA),
    ("Kristensen", "Le Mans", VehicleCategory.GT3),
    ("Latecomer", "Imola", VehicleCategory.GT3),
]


def main():
    print("=" * 60)
    print("racelog Practice Day Example")
    print("=" * 60)
    
    generator = LapTimeGenerator(GeneratorConfig(seed=42))
    store = SessionStore()
    
    # Step 1: Record sessions until the store is full
    print("\n1. Recording sessions...")
    for driver, track, category in ENTRIES:
        session = generator.create_session(driver, track, category)
        stored = store.add(session)
        status = "stored" if stored else "rejected (store full)"
        laps = ", ".join(f"{t:.2f}" for t in session.lap_times)
        print(f"   {driver:<12} {category.label:<8} [{laps}] -> {status}")
    
    # Step 2: Averages
    print("\n2. Averages")
    for session in store:
        print(f"   {session.driver_name:<12} {average_lap(session):.2f} s")
    print(f"   Overall: {overall_average(store):.2f} s over {store.count()} sessions")
    
    # Step 3: Report
    print("\n3. Writing report...")
    exporter = ReportExporter(ExporterConfig(output_dir="./reports"))
    path = exporter.export(store, filename="practice_day.txt")
    print(f"   Saved to {path}")
    print()
    print(path.read_text())


if __name__ == "__main__":
    main()
