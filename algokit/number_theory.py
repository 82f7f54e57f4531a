"""Number-theoretic helpers: sieve, gcd, inverses, binomials, totient."""


def mobius_sieve(n):
    """Linear sieve up to ``n``; return ``(primes, mobius)``.

    ``mobius`` has length ``n + 1`` with ``mobius[0] == 0``.
    """
    if n < 1:
        raise ValueError("n must be at least 1")
    mobius = [0] * (n + 1)
    composite = [False] * (n + 1)
    primes = []
    mobius[1] = 1
    for i in range(2, n + 1):
        if not composite[i]:
            primes.append(i)
            mobius[i] = -1
        for p in primes:
            if p * i > n:
                break
            composite[p * i] = True
            if i % p == 0:
                mobius[p * i] = 0
                break
            mobius[p * i] = -mobius[i]
    return primes, mobius


def exgcd(a, b):
    """Return ``(d, x, y)`` with ``a*x + b*y == d == gcd(a, b)`` for ``a, b >= 0``."""
    if b == 0:
        return a, 1, 0
    d, y, x = exgcd(b, a % b)
    y -= a // b * x
    return d, x, y


def mod_inverse(n, m):
    """Return ``x`` in ``0..m-1`` with ``n*x == 1 (mod m)``."""
    d, x, _ = exgcd(n % m, m)
    if d != 1:
        raise ValueError(f"{n} has no inverse modulo {m}")
    return x % m


def comb_mod(a, b, p):
    """Binomial ``C(a, b)`` modulo the prime ``p``, for ``a < p``."""
    if a < b:
        return 0
    result = 1
    for j, i in enumerate(range(a, b, -1), start=1):
        result = result * i % p
        result = result * pow(j, p - 2, p) % p
    return result


def lucas(a, b, p):
    """Binomial ``C(a, b)`` modulo the prime ``p`` by Lucas' theorem."""
    result = 1
    while a >= p or b >= p:
        result = result * comb_mod(a % p, b % p, p) % p
        a //= p
        b //= p
    return result * comb_mod(a, b, p) % p


def phi(n):
    """Euler's totient of ``n``."""
    result = n
    i = 2
    while i * i <= n:
        if n % i == 0:
            while n % i == 0:
                n //= i
            result = result // i * (i - 1)
        i += 1
    if n > 1:
        result = result // n * (n - 1)
    return result