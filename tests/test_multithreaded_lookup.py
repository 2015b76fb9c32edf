import ipaddress
import random
import threading

from concurrent.futures import ThreadPoolExecutor

import addrtrie


rand = random.Random(0x4d3d3d3)


def random_address(network):
    host_bits = 32 - network.prefixlen
    random_bits = rand.randint(0, 2**host_bits - 1)
    random_ip_int = int(network.network_address) + random_bits
    return ipaddress.IPv4Address(random_ip_int)


def random_network():
    # leave at least 4 bits of randomness for network addresses
    masklen = rand.randint(0, 28)
    network_int = rand.randint(0, 2**masklen - 1)
    return ipaddress.IPv4Network((network_int << (32 - masklen), masklen))


def chunks(seq, size):
    return (seq[pos:pos + size] for pos in range(0, len(seq), size))


def longest_match(networks, address):
    best = None
    for network in networks:
        if address in network:
            if best is None or network.prefixlen > best.prefixlen:
                best = network
    return None if best is None else str(best)


def _check_frozen_trie(trie):
    networks = [random_network() for _ in range(100)]
    addresses = [
        random_address(network) for network in networks for _ in range(10)]
    rand.shuffle(addresses)

    for network in networks:
        trie.insert(str(network), str(network))

    n_readers = 4
    b = threading.Barrier(n_readers)

    def read(chunk):
        b.wait()
        return [(address, trie.find(str(address))) for address in chunk]

    with ThreadPoolExecutor(max_workers=n_readers) as executor:
        results = executor.map(
            read, chunks(addresses, len(addresses) // n_readers))
        for chunk_results in results:
            for address, found in chunk_results:
                assert found == longest_match(networks, address)


def test_multithreaded_lookup():
    _check_frozen_trie(addrtrie.BitTrie4())


def test_multithreaded_lookup_with_cache():
    _check_frozen_trie(addrtrie.BitTrie4(cache_size=64))
