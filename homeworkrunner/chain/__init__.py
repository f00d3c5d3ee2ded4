"""Example account programs in plain Python: greeting, counter, primes, calls, derived accounts, lottery and voting."""