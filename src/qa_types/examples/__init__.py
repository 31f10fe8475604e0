r"""
One small, self-contained example per illustrated testing category.

| Package        | Category     | What it shows                                                    |
| -------------- | ------------ | ---------------------------------------------------------------- |
| `unit`         | Unit         | `add(2, 3) == 5`                                                 |
| `integration`  | Integration  | service + directory + database: user 1 is "John Doe"             |
| `functional`   | Functional   | a browser fills the login form and sees the success message      |
| `performance`  | Performance  | a 0.1s workload finishes under the threshold                     |
| `security`     | Security     | OWASP ZAP spiders and actively scans a target, zero alerts       |

The examples do not call each other. The one shared piece is the login demo app in `functional`,
which serves the integration example's user lookup at `/api/users/{id}`.
"""
