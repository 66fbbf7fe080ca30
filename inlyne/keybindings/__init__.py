"""Keys, modifier states and multi-key combos."""