"""Event publish gate: readiness checks, approval requests and status history."""
