"""Lottery contract interface used by the injector."""

Lottery_abi = [
    {
        "inputs": [],
        "name": "currentLotteryId",
        "outputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [
            {"internalType": "uint256", "name": "_lotteryId", "type": "uint256"},
            {"internalType": "uint256", "name": "_amount", "type": "uint256"},
        ],
        "name": "injectFunds",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function",
    },
]
