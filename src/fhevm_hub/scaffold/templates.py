"""Text templates for generated example projects.

Source templates use str.format() with named placeholders, so literal
braces in Solidity and TypeScript are doubled. The JSON manifests are
plain dicts serialized by the generator.
"""

from __future__ import annotations

# ── Contract ──────────────────────────────────────────────────────

CONTRACT_TEMPLATE = """\
// SPDX-License-Identifier: BSD-3-Clause-Clear
pragma solidity ^0.8.24;

import "@fhevm/solidity/lib/FHE.sol";
import {{ ZamaEthereumConfig }} from "@fhevm/solidity/config/ZamaConfig.sol";

/**
 * @title {display_name}
 * @notice Example demonstrating {category} patterns with FHEVM
 * @dev This contract showcases how to use encrypted types and operations
 */
contract {contract_name} is ZamaEthereumConfig {{
    /**
     * @notice Example encrypted storage variable
     */
    euint32 private encryptedValue;

    /**
     * @notice Initialize with encrypted value
     */
    constructor() {{
        encryptedValue = FHE.asEuint32(0);
    }}

    /**
     * @notice Get the encrypted value
     * @return The encrypted value stored in contract
     */
    function getEncryptedValue() external view returns (euint32) {{
        return encryptedValue;
    }}

    /**
     * @notice Set encrypted value
     * @param newValue The new encrypted value to store
     * @param inputProof Proof for input encryption
     */
    function setEncryptedValue(externalEuint32 newValue, bytes calldata inputProof) external {{
        euint32 encryptedInput = FHE.fromExternal(newValue, inputProof);
        encryptedValue = encryptedInput;
        FHE.allowThis(encryptedValue);
    }}

    /**
     * @notice Add to encrypted value
     * @param addAmount Amount to add
     * @param inputProof Proof for input encryption
     */
    function addToValue(externalEuint32 addAmount, bytes calldata inputProof) external {{
        euint32 encryptedAmount = FHE.fromExternal(addAmount, inputProof);
        encryptedValue = FHE.add(encryptedValue, encryptedAmount);
        FHE.allowThis(encryptedValue);
    }}
}}
"""

# ── Test suite ────────────────────────────────────────────────────

TEST_TEMPLATE = """\
import {{ expect }} from "chai";
import {{ ethers }} from "hardhat";
import {{ Contract, Signer }} from "ethers";

/**
 * @test {contract_name} Test Suite
 * @chapter basic
 * @description Complete test coverage for the {contract_name} contract
 */
describe("{contract_name}", function () {{
    let contract: Contract;
    let owner: Signer;

    before(async function () {{
        const [ownerSigner] = await ethers.getSigners();
        owner = ownerSigner;

        const ContractFactory = await ethers.getContractFactory("{contract_name}");
        contract = await ContractFactory.deploy();
        await contract.waitForDeployment();
    }});

    /**
     * @test Deployment
     * @category basic
     */
    it("should deploy successfully", async function () {{
        expect(contract.target).to.not.equal(ethers.ZeroAddress);
    }});

    /**
     * @test Basic operations
     * @category basic
     */
    it("should get encrypted value", async function () {{
        const value = await contract.getEncryptedValue();
        expect(value).to.not.be.undefined;
    }});
}});
"""

# ── Build configuration ───────────────────────────────────────────

# No placeholders: written verbatim, so braces are not doubled.
HARDHAT_CONFIG = """\
import { HardhatUserConfig } from "hardhat/config";
import "@nomiclabs/hardhat-ethers";
import "@nomiclabs/hardhat-etherscan";
import "hardhat-deploy";
import "hardhat-gas-reporter";

require("dotenv").config();

const MNEMONIC = process.env.MNEMONIC || "test test test test test test test test test test test junk";
const INFURA_API_KEY = process.env.INFURA_API_KEY || "";

const config: HardhatUserConfig = {
    solidity: {
        version: "0.8.24",
        settings: {
            optimizer: { enabled: true, runs: 200 }
        }
    },
    networks: {
        localhost: { url: "http://127.0.0.1:8545", chainId: 1337 },
        sepolia: {
            url: `https://sepolia.infura.io/v3/${INFURA_API_KEY}`,
            accounts: { mnemonic: MNEMONIC },
            chainId: 11155111
        }
    }
};

export default config;
"""

TSCONFIG: dict = {
    "compilerOptions": {
        "target": "ES2020",
        "module": "commonjs",
        "lib": ["ES2020"],
        "outDir": "./dist",
        "rootDir": "./",
        "strict": True,
        "esModuleInterop": True,
        "skipLibCheck": True,
        "forceConsistentCasingInFileNames": True,
    },
    "include": ["**/*.ts"],
    "exclude": ["node_modules", "dist"],
}

PACKAGE_SCRIPTS = {
    "compile": "hardhat compile",
    "test": "hardhat test",
    "deploy": "hardhat deploy --network sepolia",
}

PACKAGE_DEPENDENCIES = {
    "@fhevm/solidity": "^0.3.0",
    "@openzeppelin/contracts": "^5.0.1",
    "ethers": "^6.10.0",
}

PACKAGE_DEV_DEPENDENCIES = {
    "@nomiclabs/hardhat-ethers": "^2.2.3",
    "@types/chai": "^4.3.11",
    "@types/mocha": "^10.0.6",
    "chai": "^4.3.10",
    "hardhat": "^2.19.4",
    "hardhat-deploy": "^0.11.45",
    "typescript": "^5.3.3",
}

# ── README ────────────────────────────────────────────────────────

README_TEMPLATE = """\
# {display_name}

{description}

## Features

{features_block}

## Quick Start

```bash
npm install
npm run compile
npm run test
```

## Deployment

```bash
npm run deploy
```
"""


def format_feature(feature: str) -> str:
    """Format a single feature as a markdown bullet."""
    return f"- {feature}"


def package_manifest(example_key: str, description: str) -> dict:
    """Build the package.json contents for an example project."""
    return {
        "name": f"fhevm-example-{example_key}",
        "version": "1.0.0",
        "description": description,
        "scripts": dict(PACKAGE_SCRIPTS),
        "dependencies": dict(PACKAGE_DEPENDENCIES),
        "devDependencies": dict(PACKAGE_DEV_DEPENDENCIES),
    }
