"""cluwaste - measure disk space wasted in partially filled final clusters."""
