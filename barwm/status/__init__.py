"""Status components for CPU, memory, swap, battery, network and keyboard state."""