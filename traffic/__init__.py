"""Traffic flow, congestion scoring and incidents."""
