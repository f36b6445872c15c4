#!/usr/bin/env python3
"""
Basic Simulation Example

This example demonstrates how to:
1. Configure and start a seeded simulation
2. Drive the ship with scripted controls
3. Read score, lives and audio cues from each tick
4. Convert a snapshot to display coordinates for a renderer

Run with: python run_simulation.py
"""

from collections import Counter
import logging

from spacerocks import Simulator, SimulatorConfig, ShipInputs


def scripted_controls(frame: int) -> ShipInputs:
    """Spin slowly and keep firing, with bursts of thrust."""
    return ShipInputs(
        turn_left=(frame // 90) % 2 == 0,
        turn_right=(frame // 90) % 2 == 1,
        thrust=frame % 240 < 30,
        fire=True,
    )


def main():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    
    print("=" * 60)
    print("SpaceRocks Basic Simulation Example")
    print("=" * 60)
    
    # Step 1: Create simulator
    print("\n1. Setting up simulation...")
    config = SimulatorConfig(seed=42, target_asteroids=12)
    sim = Simulator(config)
    sim.start()
    print(f"   Asteroids in field: {len(sim.asteroids)}")
    
    # Step 2: Run simulation
    print("\n2. Running simulation (1800 ticks at 60Hz = 30 seconds)...")
    cue_counts = Counter()
    
    for frame in range(1800):
        result = sim.step(scripted_controls(frame), dt=config.fixed_dt)
        cue_counts.update(cue.value for cue in result.cues)
        
        if result.game_over:
            print(f"   Frame {frame}: game over, starting again")
        
        if (frame + 1) % 300 == 0:
            print(f"   Frame {frame + 1}: Score = {result.score}, "
                  f"Lives = {result.lives}, "
                  f"Asteroids = {len(sim.asteroids)}")
    
    # Step 3: Render-side view of the last frame
    print("\n3. Final snapshot (display coordinates):")
    drawn = result.snapshot.to_draw_space(sim.world.arena.width, sim.world.arena.height)
    if drawn.exploding:
        print(f"   Ship exploding, {len(drawn.ship_fragments)} fragments")
    else:
        nose = drawn.ship_outline[1]
        print(f"   Ship nose at ({nose[0]:.1f}, {nose[1]:.1f})")
    print(f"   Lasers in flight: {len(drawn.lasers)}")
    print(f"   Asteroid outlines: {len(drawn.asteroid_outlines)}")
    print(f"   Debris particles: {len(drawn.particles)}")
    
    # Step 4: Statistics
    print("\n4. Session statistics:")
    scoring = sim.world.scoreboard.get_state()
    print(f"   Simulation time: {sim.time:.2f} seconds")
    print(f"   High score: {scoring['high_score']}")
    print(f"   Hits by size: {scoring['hits']}")
    print(f"   Cues: {dict(cue_counts)}")
    
    sim.stop()
    print("\n" + "=" * 60)
    print("Simulation complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
