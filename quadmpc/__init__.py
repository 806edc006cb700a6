"""Polynomial root finding, bound-constrained QP building blocks and quadrotor MPC references."""

__version__ = "0.1.0"