"""Tests for physics constants, the particle catalog and the closed-form evaluators."""

import math

import numpy as np
import pytest
from numpy.testing import assert_allclose

from bethe_bloch.config.enums import BetheFormula
from bethe_bloch.core.constants import (
    BETHE_K,
    ELECTRON_MASS_MEV,
    I_COEFFICIENT_MEV,
    PhysicsConstants,
)
from bethe_bloch.core.kinematics import (
    DomainError,
    beta_squared,
    kinetic_energy,
    max_energy_transfer,
    mean_excitation_energy,
    stopping_power,
)
from bethe_bloch.core.particles import MUON, PARTICLES, PROTON, get_particle


class TestPhysicsConstants:
    """Tests for PhysicsConstants dataclass."""

    def test_defaults(self):
        """Test the default calibration values."""
        constants = PhysicsConstants()

        assert constants.m_e == 0.511
        assert constants.K == 0.3072
        assert constants.i_coefficient == 1e-5
        assert constants.mev_per_gev == 1000.0

    def test_invalid_electron_mass(self):
        """Test that a non-positive electron mass raises ValueError."""
        with pytest.raises(ValueError, match="Electron mass must be positive"):
            PhysicsConstants(m_e=0.0)

    def test_invalid_excitation_coefficient(self):
        """Test that a non-positive excitation coefficient raises ValueError."""
        with pytest.raises(ValueError, match="Excitation coefficient must be positive"):
            PhysicsConstants(i_coefficient=-1.0)

    def test_from_dict(self):
        """Test construction from the physics section of defaults.yaml."""
        constants = PhysicsConstants.from_dict({"k": 0.307075, "i_coefficient_mev": 1.6e-5})

        assert constants.K == 0.307075
        assert constants.i_coefficient == 1.6e-5
        assert constants.m_e == ELECTRON_MASS_MEV


class TestParticleCatalog:
    """Tests for the six-entry particle catalog."""

    def test_order_and_labels(self):
        """Test legend order and labels."""
        assert [p.label for p in PARTICLES] == ["Electron", "Muon", "Pi", "Proton", "D", "Alpha"]

    def test_masses_are_electron_multiples(self):
        """Test rest masses relative to the electron mass."""
        multiples = [p.rest_mass / ELECTRON_MASS_MEV for p in PARTICLES]
        assert_allclose(multiples, [1, 207, 273, 1836, 3649, 7294])

    def test_colors(self):
        """Test curve colors."""
        assert [p.color for p in PARTICLES] == [
            (0, 255, 255),
            (255, 0, 255),
            (255, 255, 0),
            (0, 0, 255),
            (0, 255, 0),
            (255, 0, 0),
        ]

    def test_get_particle(self):
        """Test lookup by name."""
        assert get_particle("proton") is PROTON
        assert get_particle("muon") is MUON

    def test_get_unknown_particle(self):
        """Test that an unknown name raises KeyError."""
        with pytest.raises(KeyError, match="Unknown particle"):
            get_particle("kaon")


class TestKineticEnergy:
    """Tests for kinetic_energy."""

    def test_zero_at_rest(self):
        """Test that βγ = 0 gives exactly 0 without NaN."""
        for particle in PARTICLES:
            assert kinetic_energy(0.0, particle.rest_mass) == 0.0

    def test_gamma_two_gives_rest_mass(self):
        """Test E_k = m at γ = 2 (βγ = √3)."""
        assert kinetic_energy(math.sqrt(3.0), 1.0) == pytest.approx(1.0)
        assert kinetic_energy(math.sqrt(3.0), PROTON.rest_mass) == pytest.approx(PROTON.rest_mass)

    def test_scalar_returns_float(self):
        """Test that scalar input returns a Python float."""
        assert isinstance(kinetic_energy(1.0, 1.0), float)

    def test_array_input(self):
        """Test vectorised evaluation including βγ = 0."""
        bg = np.array([0.0, 0.5, 1.0, 2.0])
        expected = np.sqrt(bg * bg + 1.0) - 1.0

        assert_allclose(kinetic_energy(bg, 1.0), expected, atol=1e-12)

    def test_monotonic_in_beta_gamma(self):
        """Test strict increase with βγ for every particle."""
        bg = np.linspace(0.0, 5.0, 501)
        for particle in PARTICLES:
            energy = kinetic_energy(bg, particle.rest_mass)
            assert np.all(np.isfinite(energy))
            assert np.all(np.diff(energy) > 0)

    def test_heavier_particle_has_more_energy(self):
        """Test ordering by mass at fixed βγ."""
        energies = [kinetic_energy(1.5, p.rest_mass) for p in PARTICLES]
        assert energies == sorted(energies)

    def test_finite_for_huge_beta_gamma(self):
        """Test that βγ whose square overflows still gives E_k close to m βγ."""
        energy = kinetic_energy(np.array([1e160, 1e300]), 1.0)

        assert np.all(np.isfinite(energy))
        assert_allclose(energy, [1e160, 1e300], rtol=1e-12)

    def test_negative_beta_gamma(self):
        """Test that negative βγ raises DomainError."""
        with pytest.raises(DomainError, match="beta_gamma must be >= 0"):
            kinetic_energy(-0.1, 1.0)

    def test_non_positive_mass(self):
        """Test that a non-positive mass raises DomainError."""
        with pytest.raises(DomainError, match="mass must be > 0"):
            kinetic_energy(1.0, 0.0)


class TestStoppingPowerHelpers:
    """Tests for beta_squared, max_energy_transfer and mean_excitation_energy."""

    def test_beta_squared(self):
        """Test β² at βγ = 1."""
        assert beta_squared(1.0) == pytest.approx(0.5)

    def test_max_energy_transfer(self):
        """Test Wm = 2 m_e (βγ)²."""
        assert max_energy_transfer(2.0) == pytest.approx(2.0 * 0.511 * 4.0)

    def test_mean_excitation_energy(self):
        """Test I = k1 Z."""
        assert mean_excitation_energy(6) == pytest.approx(6e-5)


class TestStoppingPower:
    """Tests for the Bethe-Bloch stopping power."""

    def test_closed_form_hydrogen(self):
        """Test the simplified formula at A = 1, Z = 1, βγ = 1."""
        expected = BETHE_K * 2.0 * (math.log(1.022 / I_COEFFICIENT_MEV) - 0.5)

        assert stopping_power(1.0, 1, 1.0, 1.0, 10.0, 10.0) == pytest.approx(expected, rel=1e-9)

    def test_simplified_ignores_charge_tmax_delta(self):
        """Test that z, t_max and delta do not enter the simplified formula."""
        base = stopping_power(12.0, 6, 1.0, 3.0, 10.0, 10.0)

        assert stopping_power(12.0, 6, 2.0, 3.0, 1.0, 0.0) == pytest.approx(base)

    def test_scales_with_z_over_a(self):
        """Test the Z/A prefactor at fixed I."""
        one = stopping_power(1.0, 1, 1.0, 2.0, 10.0, 10.0)
        half = stopping_power(2.0, 1, 1.0, 2.0, 10.0, 10.0)

        assert half == pytest.approx(one / 2.0)

    def test_finite_over_default_range(self):
        """Test finiteness on (0, x_max] of the default stopping-power axis."""
        bg = np.geomspace(1e-3, 1000.0, 2001)
        values = stopping_power(1.0, 1, 1.0, bg, 10.0, 10.0)

        assert values.shape == bg.shape
        assert np.all(np.isfinite(values))

    def test_minimum_ionization(self):
        """Test that the curve falls then rises (minimum ionization near βγ ~ 3)."""
        bg = np.geomspace(0.1, 1000.0, 401)
        values = stopping_power(1.0, 1, 1.0, bg, 10.0, 10.0)
        i_min = int(np.argmin(values))

        assert 0 < i_min < len(bg) - 1
        assert 1.0 < bg[i_min] < 10.0

    def test_pdg_closed_form(self):
        """Test the PDG variant at A = 1, Z = 1, z = 1, βγ = 1."""
        i_exc = I_COEFFICIENT_MEV
        bracket = 0.5 * math.log(2.0 * 0.511 * 10.0 / (i_exc * i_exc)) - 0.5 - 5.0
        expected = BETHE_K * bracket / 0.5

        result = stopping_power(1.0, 1, 1.0, 1.0, 10.0, 10.0, formula=BetheFormula.PDG)

        assert result == pytest.approx(expected)

    def test_pdg_charge_squared(self):
        """Test the z² dependence of the PDG variant."""
        single = stopping_power(1.0, 1, 1.0, 2.0, 10.0, 0.0, formula=BetheFormula.PDG)
        double = stopping_power(1.0, 1, 2.0, 2.0, 10.0, 0.0, formula=BetheFormula.PDG)

        assert double == pytest.approx(4.0 * single)

    def test_custom_excitation_coefficient(self):
        """Test that k1 is taken from the constants."""
        constants = PhysicsConstants(i_coefficient=1e-6)
        expected = BETHE_K * 2.0 * (math.log(1.022 / 1e-6) - 0.5)

        assert stopping_power(1.0, 1, 1.0, 1.0, 10.0, 10.0, constants=constants) == pytest.approx(expected)

    @pytest.mark.parametrize("beta_gamma", [0.0, -1.0])
    def test_non_positive_beta_gamma(self, beta_gamma):
        """Test that βγ <= 0 raises DomainError."""
        with pytest.raises(DomainError, match="beta_gamma must be > 0"):
            stopping_power(1.0, 1, 1.0, beta_gamma, 10.0, 10.0)

    def test_invalid_mass_number(self):
        """Test that A <= 0 raises DomainError."""
        with pytest.raises(DomainError, match="A must be > 0"):
            stopping_power(0.0, 1, 1.0, 1.0, 10.0, 10.0)

    @pytest.mark.parametrize("z_big", [0, 2.5])
    def test_invalid_atomic_number(self, z_big):
        """Test that a non-integer or zero Z raises DomainError."""
        with pytest.raises(DomainError, match="Z must be an integer"):
            stopping_power(1.0, z_big, 1.0, 1.0, 10.0, 10.0)

    def test_pdg_requires_positive_t_max(self):
        """Test that the PDG variant rejects t_max <= 0."""
        with pytest.raises(DomainError, match="t_max must be > 0"):
            stopping_power(1.0, 1, 1.0, 1.0, 0.0, 10.0, formula=BetheFormula.PDG)
