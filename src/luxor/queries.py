"""GraphQL query documents for the Luxor pool API.

Field selections here must stay in sync with the mappers in
``luxor.normalize.mappers``.
"""

SUBACCOUNTS = """
query getSubaccountAccessList($first: Int, $last: Int, $offset: Int) {
    users(first: $first, last: $last, offset: $offset) {
        nodes {
            username
        }
    }
}
"""

WORKER_DETAILS = """
query getWorkerDetails($mpn: MiningProfileName!, $duration: IntervalInput!, $uname: String!, $first: Int, $last: Int, $offset: Int) {
    getWorkerDetails(mpn: $mpn, duration: $duration, uname: $uname, first: $first, last: $last, offset: $offset) {
        edges {
            node {
                minerId
                workerName
                miningProfileName
                updatedAt
                status
                hashrate
                validShares
                staleShares
                invalidShares
                lowDiffShares
                badShares
                duplicateShares
                revenue
                efficiency
            }
        }
    }
}
"""

WORKER_HASHRATE_HISTORY = """
query getWorkerHashrateHistory($username: String!, $workerName: String!, $mpn: MiningProfileName!, $inputBucket: HashrateIntervals!, $inputDuration: HashrateIntervals!, $first: Int, $last: Int, $offset: Int) {
    getWorkerHashrateHistory(username: $username, workerName: $workerName, mpn: $mpn, inputDuration: $inputDuration, inputBucket: $inputBucket, first: $first, last: $last, offset: $offset) {
        edges {
            node {
                time
                hashrate
                dataPoints
            }
        }
    }
}
"""

MINING_SUMMARY = """
query getMiningSummary($mpn: MiningProfileName!, $userName: String!, $inputDuration: HashrateIntervals!) {
    getMiningSummary(mpn: $mpn, userName: $userName, inputDuration: $inputDuration) {
        username
        validShares
        invalidShares
        staleShares
        lowDiffShares
        badShares
        duplicateShares
        revenue
        hashrate
    }
}
"""

ALL_SUBACCOUNTS_HASHRATE_HISTORY = """
query getAllSubaccountsHashrateHistory($mpn: MiningProfileName!, $inputInterval: HashrateIntervals, $first: Int, $last: Int, $offset: Int) {
    getAllSubaccountsHashrateHistory(mpn: $mpn, inputInterval: $inputInterval, first: $first, last: $last, offset: $offset) {
        edges {
            node {
                hashrateHistory
                username
            }
        }
    }
}
"""

PROFILE_HASHRATE = """
query getProfileHashrate($mpn: MiningProfileName!) {
    getProfileHashrate(mpn: $mpn)
}
"""

HASHRATE_SCORE_HISTORY = """
query getHashrateScoreHistory($mpn: MiningProfileName!, $uname: String!, $first: Int, $last: Int, $offset: Int) {
    getHashrateScoreHistory(mpn: $mpn, uname: $uname, first: $first, last: $last, offset: $offset, orderBy: DATE_DESC) {
        nodes {
            date
            efficiency
            hashrate
            revenue
            uptimePercentage
            uptimeTotalMinutes
            uptimeTotalMachines
        }
    }
}
"""

TRANSACTION_HISTORY = """
query getTransactionHistory($uname: String!, $cid: CurrencyProfileName!, $first: Int, $last: Int, $offset: Int) {
    getTransactionHistory(uname: $uname, cid: $cid, first: $first, last: $last, offset: $offset, orderBy: CREATED_AT_DESC) {
        edges {
            node {
                amount
                coinPrice
                createdAt
                rowId
                status
                transactionId
            }
        }
    }
}
"""

POOL_HASHRATE = """
query getPoolHashrate($mpn: MiningProfileName!, $orgSlug: String!) {
    getPoolHashrate(mpn: $mpn, orgSlug: $orgSlug)
}
"""
