"""Tests for the SpaceRocks ship."""

import pytest
import numpy as np

from spacerocks.core.cues import Cue
from spacerocks.core.physics import ArenaConfig, vec
from spacerocks.core.sizes import AsteroidSize
from spacerocks.field.asteroid import Asteroid
from spacerocks.ship.controls import Control, ShipInputs
from spacerocks.ship.laser import Laser
from spacerocks.ship.ship import FlightState, Ship, ShipConfig

DT = 1 / 60


def _asteroid_at(generator, x, y, size=AsteroidSize.MEDIUM):
    return Asteroid(
        size=size,
        position=vec(x, y),
        velocity=vec(1.0, 0.0),
        outline=generator.generate_outline(size.radius),
    )


class TestControls:
    """Test input capabilities."""
    
    def test_is_active(self):
        """Each flag maps to its control."""
        inputs = ShipInputs(thrust=True)
        assert inputs.is_active(Control.THRUST)
        assert not inputs.is_active(Control.FIRE)
    
    def test_from_active(self):
        """Inputs can be built from a set of held controls."""
        inputs = ShipInputs.from_active({Control.TURN_LEFT, Control.FIRE})
        assert inputs == ShipInputs(turn_left=True, fire=True)


class TestShipFlight:
    """Test flight model."""
    
    def test_initial_state(self):
        """Ship starts flying at the origin with full lives."""
        ship = Ship()
        assert not ship.is_exploding
        assert ship.lives == 3
        assert np.allclose(ship.position, [0.0, 0.0])
    
    def test_turning(self, sampler):
        """Turn controls rotate at the configured rate."""
        ship = Ship()
        ship.update(0.5, ShipInputs(turn_left=True), [], sampler)
        assert ship.angle == pytest.approx(2.0)
        
        ship.update(0.5, ShipInputs(turn_right=True), [], sampler)
        assert ship.angle == pytest.approx(0.0)
    
    def test_thrust(self, sampler):
        """Thrust accelerates along the facing and emits a cue."""
        ship = Ship()
        cues = ship.update(0.1, ShipInputs(thrust=True), [], sampler)
        
        expected = 6.0 * 0.1 * (1.0 - 0.01)
        assert np.allclose(ship.velocity, [0.0, expected])
        assert np.allclose(ship.position, [0.0, expected])
        assert Cue.THRUST in cues
    
    def test_drag_decay(self, sampler):
        """Without thrust velocity shrinks by the drag factor each tick."""
        ship = Ship()
        ship.state.velocity = vec(2.0, -1.0)
        ship.update(DT, ShipInputs(), [], sampler)
        assert np.allclose(ship.velocity, [2.0 * 0.99, -1.0 * 0.99])
    
    def test_drag_never_reaches_zero(self, sampler):
        """Repeated drag approaches zero without reaching it."""
        ship = Ship()
        ship.state.velocity = vec(1.0, 0.0)
        for _ in range(1000):
            ship.update(DT, ShipInputs(), [], sampler)
        assert 0.0 < ship.velocity[0] < 1e-3
    
    def test_wrap_preserves_velocity(self, sampler):
        """Crossing the right edge re-enters on the left."""
        ship = Ship()
        ship.state.position = vec(319.0, 0.0)
        ship.state.velocity = vec(3.0, 0.0)
        ship.update(DT, ShipInputs(), [], sampler)
        
        assert ship.velocity[0] == pytest.approx(2.97)
        assert ship.position[0] == pytest.approx(319.0 + 2.97 - 640.0)
    
    def test_wrap_with_zero_velocity(self, sampler):
        """A ship placed past the edge is wrapped by one full width."""
        ship = Ship()
        ship.state.position = vec(320.0 + 5.0, 0.0)
        ship.update(DT, ShipInputs(), [], sampler)
        assert ship.position[0] == pytest.approx(5.0 - 320.0)
        assert np.allclose(ship.velocity, [0.0, 0.0])


class TestShipWeapons:
    """Test laser firing."""
    
    def test_fire_from_rest(self, sampler):
        """One tick of fire spawns one laser at the nose."""
        ship = Ship()
        cues = ship.update(DT, ShipInputs(fire=True), [], sampler)
        
        assert cues == [Cue.SHOOT]
        assert len(ship.lasers) == 1
        assert np.allclose(ship.lasers[0].position, [0.0, 25.0])
        assert np.allclose(ship.lasers[0].direction, [0.0, 1.0])
        assert ship.state.fire_cooldown == pytest.approx(0.25)
    
    def test_cooldown_gates_fire(self, sampler):
        """Holding fire shoots once per cooldown period."""
        ship = Ship()
        fire = ShipInputs(fire=True)
        
        for _ in range(3):
            ship.update(0.1, fire, [], sampler)
        assert len(ship.lasers) == 1
        
        ship.update(0.1, fire, [], sampler)
        assert len(ship.lasers) == 2
    
    def test_max_lasers(self, sampler):
        """No more than max_lasers are in flight."""
        ship = Ship(ShipConfig(fire_cooldown=1e-6, max_lasers=2))
        for _ in range(5):
            ship.update(0.001, ShipInputs(fire=True), [], sampler)
        assert len(ship.lasers) == 2
    
    def test_lasers_travel(self, sampler):
        """Lasers move at laser speed."""
        ship = Ship()
        ship.update(DT, ShipInputs(fire=True), [], sampler)
        ship.update(0.1, ShipInputs(), [], sampler)
        assert np.allclose(ship.lasers[0].position, [0.0, 25.0 + 40.0])
    
    def test_hit_laser_removed_next_update(self, sampler):
        """Lasers flagged hit are dropped on the following update."""
        ship = Ship()
        ship.update(DT, ShipInputs(fire=True), [], sampler)
        ship.lasers[0].hit = True
        assert len(ship.lasers) == 1
        
        ship.update(DT, ShipInputs(), [], sampler)
        assert ship.lasers == []
    
    def test_out_of_bounds_laser_removed(self, sampler):
        """Lasers leaving the arena are dropped."""
        ship = Ship()
        ship.lasers.append(Laser(position=vec(0.0, 239.0), direction=vec(0.0, 1.0)))
        ship.update(0.1, ShipInputs(), [], sampler)
        assert ship.lasers == []
    
    def test_laser_culled_at_custom_arena_edge(self, sampler):
        """Laser culling follows the ship's arena, not the default size."""
        ship = Ship(arena=ArenaConfig(width=200.0, height=100.0))
        ship.lasers.append(Laser(position=vec(0.0, 45.0), direction=vec(0.0, 1.0)))
        ship.lasers.append(Laser(position=vec(0.0, 0.0), direction=vec(1.0, 0.0)))
        ship.update(0.02, ShipInputs(), [], sampler)
        
        assert len(ship.lasers) == 1
        assert np.allclose(ship.lasers[0].position, [8.0, 0.0])


class TestShipExplosion:
    """Test collision and explosion state machine."""
    
    def test_collision_explodes(self, sampler, generator):
        """Touching an asteroid costs a life and starts the explosion."""
        ship = Ship()
        cues = ship.update(DT, ShipInputs(), [_asteroid_at(generator, 5.0, 0.0)], sampler)
        
        assert ship.is_exploding
        assert ship.state.flight_state is FlightState.EXPLODING
        assert ship.lives == 2
        assert ship.state.explosion_time == 0.0
        assert cues == [Cue.EXPLODE]
        assert len(ship.fragments) == 3
    
    def test_single_collision_per_tick(self, sampler, generator):
        """Overlapping asteroids cost only one life."""
        ship = Ship()
        asteroids = [_asteroid_at(generator, 0.0, 0.0), _asteroid_at(generator, 1.0, 0.0)]
        cues = ship.update(DT, ShipInputs(), asteroids, sampler)
        assert ship.lives == 2
        assert cues.count(Cue.EXPLODE) == 1
    
    def test_destroyed_asteroid_harmless(self, sampler, generator):
        """Debris clouds do not collide with the ship."""
        ship = Ship()
        asteroid = _asteroid_at(generator, 0.0, 0.0)
        asteroid.mark_destroyed()
        ship.update(DT, ShipInputs(), [asteroid], sampler)
        assert not ship.is_exploding
        assert ship.lives == 3
    
    def test_distant_asteroid_harmless(self, sampler, generator):
        """Asteroids outside their radius do not collide."""
        ship = Ship()
        ship.update(DT, ShipInputs(), [_asteroid_at(generator, 100.0, 0.0)], sampler)
        assert not ship.is_exploding
    
    def test_exploding_ignores_input(self, sampler, generator):
        """No steering, thrust or fire while exploding."""
        ship = Ship()
        ship.update(DT, ShipInputs(), [_asteroid_at(generator, 0.0, 0.0)], sampler)
        position = ship.position.copy()
        
        everything = ShipInputs(turn_left=True, thrust=True, fire=True)
        cues = ship.update(DT, everything, [], sampler)
        
        assert cues == []
        assert ship.lasers == []
        assert ship.angle == 0.0
        assert np.allclose(ship.position, position)
        assert ship.state.explosion_time == pytest.approx(DT)
    
    def test_fragments_drift(self, sampler, generator):
        """Fragments move apart and slow down."""
        ship = Ship()
        ship.update(DT, ShipInputs(), [_asteroid_at(generator, 0.0, 0.0)], sampler)
        speeds = [f.speed for f in ship.fragments]
        
        ship.update(0.5, ShipInputs(), [], sampler)
        
        for fragment, speed in zip(ship.fragments, speeds):
            assert np.hypot(*fragment.displacement) == pytest.approx(speed * 0.5)
            assert fragment.speed < speed
        assert len(ship.fragment_segments()) == 3
    
    def test_explosion_ends_after_duration(self, sampler, generator):
        """The ship respawns at the origin after the explosion."""
        ship = Ship()
        ship.state.position = vec(50.0, 50.0)
        ship.state.angle = 1.0
        ship.update(DT, ShipInputs(), [_asteroid_at(generator, 50.0, 50.0)], sampler)
        assert ship.is_exploding
        
        for _ in range(5):
            ship.update(0.5, ShipInputs(), [], sampler)
        assert ship.is_exploding
        
        ship.update(0.5, ShipInputs(), [], sampler)
        assert not ship.is_exploding
        assert np.allclose(ship.position, [0.0, 0.0])
        assert np.allclose(ship.velocity, [0.0, 0.0])
        assert ship.angle == 0.0
        assert ship.state.explosion_time == 0.0
        assert ship.fragments == []
    
    def test_lives_never_negative(self, sampler):
        """Exploding with no lives left keeps lives at zero."""
        ship = Ship()
        ship.state.lives = 0
        ship.explode(sampler)
        assert ship.lives == 0
    
    def test_reset(self, sampler, generator):
        """Reset restores a fresh ship."""
        ship = Ship()
        ship.update(DT, ShipInputs(fire=True), [_asteroid_at(generator, 0.0, 0.0)], sampler)
        ship.reset()
        assert ship.lives == 3
        assert not ship.is_exploding
        assert ship.lasers == []


class TestShipConfig:
    """Test configuration validation."""
    
    def test_invalid_cooldown(self):
        with pytest.raises(ValueError):
            ShipConfig(fire_cooldown=0.0)
    
    def test_invalid_drag(self):
        with pytest.raises(ValueError):
            ShipConfig(drag=1.0)
