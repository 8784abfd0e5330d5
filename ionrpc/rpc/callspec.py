"""Method signature table for the ION daemon RPC interface.

Each entry maps the declared method name to a space separated list of
argument type tags (see :mod:`ionrpc.rpc.coercers`). Positions beyond the
listed tags are sent as given.
"""

from __future__ import annotations

from functools import lru_cache
from types import MappingProxyType
from typing import Mapping

from ionrpc.rpc.coercers import ArgType

_CALLSPEC: dict[str, str] = {
    # Addressindex
    "getAddressBalance": "obj",
    "getAddressDeltas": "obj",
    "getAddressMempool": "obj",
    "getAddressTxids": "obj",
    "getAddressUtxos": "obj",

    # Blockchain
    "getBestBlockHash": "",
    "getBestChainLock": "",
    "getBlock": "str int",
    "getBlockchainInfo": "",
    "getBlockCount": "",
    "getBlockHash": "int",
    "getBlockHashes": "int int obj",
    "getBlockHeader": "str bool",
    "getBlockHeaders": "str int bool",
    "getBlockStats": "str",
    "getChainTips": "",
    "getChainTxStats": "int str",
    "getDifficulty": "",
    "getMempoolAncestors": "str bool",
    "getMempoolDescendants": "str bool",
    "getMemPoolEntry": "str",
    "getMemPoolInfo": "",
    "getMerkleBlocks": "str str int",
    "getRawMemPool": "bool",
    "getSpecialTxes": "str int int int int",
    "getSpentInfo": "obj",
    "getTxOut": "str int bool",
    "getTxOutProof": "str str",
    "getTxOutSetInfo": "",
    "preciousBlock": "str",
    "pruneBlockchain": "",
    "scanTxOutSet": "str",
    "verifyChain": "int int",
    "verifyTxOutProof": "str",

    # Control
    "debug": "str",
    "getInfo": "",
    "getMemoryInfo": "str",
    "help": "",
    "stop": "",
    "uptime": "",

    # Evo
    "bls": "str",
    "protx": "str",
    "quorum": "str",

    # Generating
    "generate": "int",
    "generateToAddress": "int str",

    # Ion
    "getGovernanceInfo": "",
    "getPoolInfo": "",
    "getPrivateSendInfo": "",
    "getSuperBlockBudget": "int",
    "gObject": "str",
    "masternode": "str",
    "masternodeList": "",
    "mnSync": "str",
    "privateSend": "str",
    "spork": "str",
    "voteRaw": "str int str str str str str",

    # Mining
    "getBlockTemplate": "",
    "getMiningInfo": "",
    "getnetworkhashps": "",
    "prioritiseTransaction": "str float int",
    "submitBlock": "",

    # Network
    "addNode": "",
    "clearBanned": "",
    "disconnectNode": "",
    "getAddedNodeInfo": "",
    "getConnectionCount": "",
    "getNetTotals": "",
    "getNetworkInfo": "",
    "getPeerInfo": "",
    "listBanned": "",
    "ping": "",
    "setBan": "str str",
    "setNetworkActive": "bool",

    # Raw Transactions
    "combineRawTransaction": "str",
    "createRawTransaction": "obj obj",
    "decodeRawTransaction": "",
    "decodeScript": "str",
    "fundRawTransaction": "str",
    "getRawTransaction": "str int",
    "sendRawTransaction": "str",
    "signRawTransaction": "",

    # Tokens
    "configureManagementToken": "str str int str str",
    "configureToken": "str str int str str",
    "createTokenAuthorities": "str str",
    "dropTokenAuthorities": "str str int",
    "getSubgroupId": "str str",
    "getTokenBalance": "",
    "getTokenTransaction": "str",
    "listTokenAuthorities": "",
    "listTokensSinceBlock": "str",
    "listTokenTransactions": "str",
    "meltToken": "str int",
    "mintToken": "str str int",
    "scanTokens": "str",
    "sendToken": "str str int",
    "tokenInfo": "str",

    # Util
    "createMultiSig": "",
    "estimateFee": "",
    "estimateSmartFee": "int str",
    "signMessageWithPrivKey": "str str",
    "validateAddress": "",
    "verifyMessage": "",

    # Wallet
    "abandonTransaction": "str",
    "abortRescan": "",
    "addMultiSigAddress": "",
    "backupWallet": "",
    "dumpHdInfo": "",
    "dumpPrivKey": "",
    "dumpWallet": "str",
    "encryptWallet": "",
    "getAccount": "",
    "getAccountAddress": "str",
    "getAddressesByAccount": "",
    "getBalance": "str int",
    "getExtendedBalance": "",
    "getNewAddress": "",
    "getRawChangeAddress": "",
    "getReceivedByAccount": "str int",
    "getReceivedByAddress": "str int",
    "getStakingStatus": "",
    "getTransaction": "",
    "getUnconfirmedBalance": "",
    "getWalletInfo": "",
    "importAddress": "str str bool",
    "importElectrumWallet": "str",
    "importMulti": "obj obj",
    "importPrivKey": "str str bool",
    "importPrunedFunds": "str str",
    "importPubKey": "str",
    "importWallet": "str",
    "keepass": "str",
    "keyPoolRefill": "",
    "listAccounts": "int",
    "listAddressBalances": "",
    "listAddressGroupings": "",
    "listLockUnspent": "bool",
    "listReceivedByAccount": "int bool",
    "listReceivedByAddress": "int bool",
    "listSinceBlock": "str int",
    "listTransactionRecords": "str int int",
    "listTransactions": "str int int",
    "listUnspent": "int int",
    "listWallets": "",
    "lockUnspent": "",
    "move": "str str float int str",
    "removePrunedFunds": "str",
    "sendFrom": "str str float int str str",
    "sendMany": "str obj int str",
    "sendToAddress": "str float str str",
    "setAccount": "",
    "setPrivateSendAmount": "int",
    "setPrivateSendRounds": "int",
    "setTxFee": "float",
    "signMessage": "",
    "walletLock": "",
    "walletPassPhrase": "string int",
    "walletPassphraseChange": "",
}

CALLSPEC: Mapping[str, str] = MappingProxyType(_CALLSPEC)


@lru_cache(maxsize=None)
def parse_signature(signature: str) -> tuple[ArgType, ...]:
    """``"str int"`` -> ``(ArgType.STR, ArgType.INT)``; empty string declares no tags."""
    return tuple(ArgType.from_tag(tag) for tag in signature.split())


def find_method(name: str, callspec: Mapping[str, str] = CALLSPEC) -> str | None:
    """Return the declared name matching ``name`` case-insensitively."""
    if name in callspec:
        return name
    lowered = name.lower()
    for declared in callspec:
        if declared.lower() == lowered:
            return declared
    return None
