# quadmpc

Numerical building blocks for quadrotor trajectory tracking with model
predictive control. Polynomials are given as coefficient sequences from the
highest degree down to the constant term, so `[1, 0, -1]` is `x**2 - 1`.

## What is in the package

Polynomials and real roots:

- `quadmpc.polynomial`: `poly_conv` (product), `poly_sqr` (square),
  `poly_val` (evaluation, stable or Horner), `poly_eval` (stable
  evaluation), `poly_mod` (remainder by a divisor whose leading
  coefficient is 1 or -1) and `poly_deri` (derivative).
- `quadmpc.closed_form`: `solve_cubic`, `solve_resolvent`,
  `solve_quartic_monic` and `solve_quartic`, closed-form real roots up to
  degree four.
- `quadmpc.sturm`: `sturm_sequence`, `num_sign_var` and `count_roots`,
  counting distinct real roots in an open interval by Sturm's theorem.
- `quadmpc.isolation`: `safe_newton` (Newton steps guarded by bisection),
  `shrink_interval`, `isolate_real_roots` (Sturm bisection) and
  `eigen_solve_real_roots` (companion-matrix eigenvalues).
- `quadmpc.roots`: `solve_polynomial` strips leading and trailing zero
  coefficients, uses the closed forms up to degree four and isolation or
  eigenvalues above that, and returns the sorted distinct roots inside
  `(lbound, ubound)`.

Pieces for a bound-constrained QP `min 1/2 x'Hx + g'x`, `lb <= x <= ub`:

- `quadmpc.qp_data`: `QPData` holds the Hessian (or its Cholesky factor),
  gradient and bounds, with `objective`, `is_identity_hessian` and
  `bounds_consistent`; `QPError` is raised for missing or malformed data.
  Missing bounds default to `-INFTY` / `INFTY` (`1e20`).
- `quadmpc.qp_cholesky`: `cholesky_free` factors the Hessian projected to a
  list of free variables; `backsolve` solves `R a = b` or `R' a = b`.
- `quadmpc.givens`: `compute_givens` and `apply_givens` plane rotations.

MPC references (`quadmpc.mission`):

- `MissionMode` (take-off, hover, tracking) and `RefPoint` trajectory
  samples.
- `hover_reference`, `takeoff_reference` and `trajectory_reference` build
  `(horizon + 1) x 14` reference arrays with rows
  `px, py, pz, qw, qx, qy, qz, vx, vy, vz, thrust, wx, wy, wz`.
- `acc_to_quaternion` turns a desired acceleration and yaw into an attitude
  `(w, x, y, z)`; `reach_goal` tests whether the squared distance to a goal
  is below `0.08`; `attitude_command` turns a control
  `(thrust, wx, wy, wz)` into normalised thrust and body rates.

## Install

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Examples

Real roots inside an open interval:

```python
from quadmpc.roots import solve_polynomial

# (x - 1)(x - 2)(x - 3)(x - 4)(x - 5)(x - 6)
coeffs = [1, -21, 175, -735, 1624, -1764, 720]
print(solve_polynomial(coeffs, 0.0, 10.0, 1e-10, True))
```

Counting distinct roots:

```python
from quadmpc.sturm import count_roots

print(count_roots([1.0, 0.0, -1.0], -2.0, 2.0))  # 2
```

QP data and a Cholesky factor on the free variables:

```python
from quadmpc.qp_data import QPData
from quadmpc.qp_cholesky import cholesky_free, backsolve

data = QPData([[4.0, 2.0], [2.0, 3.0]], [-2.0, 1.0], [0.0, 0.0], [1.0, 1.0])
print(data.objective([0.5, 0.5]))

r = cholesky_free(data.hessian, [0, 1])
print(backsolve(r, [1.0, 1.0], transposed=True))
```

A Givens rotation:

```python
from quadmpc.givens import compute_givens

print(compute_givens(3.0, 4.0))  # Givens(x=5.0, y=0.0, c=0.6, s=0.8)
```

An attitude from a desired acceleration:

```python
from quadmpc.mission import acc_to_quaternion

print(acc_to_quaternion((0.0, 0.0, 9.8066), 0.0))  # (1.0, 0.0, 0.0, 0.0)
```

## What the package does not do

- It has no complete QP solver: there is no class that runs active-set
  iterations or hot-starts a sequence of QPs. Only the data container, the
  Cholesky factorisation, the triangular solves and the Givens rotations
  are provided.
- It does not solve the MPC problem itself and does not talk to a flight
  controller or any messaging system; it only builds references and shapes
  commands.
- It has no command-line program.