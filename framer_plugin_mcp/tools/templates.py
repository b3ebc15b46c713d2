"""Source templates for generated Framer plugin projects.

Placeholders:
    plugin_name     - the plugin name as given by the caller
    component_name  - plugin name with dashes replaced by underscores
    default_text    - default value of the ``text`` property control

Literal ``$`` characters in the generated TypeScript are written as ``$$``.
"""

from string import Template

VITE_CONFIG = Template("""
import { defineConfig } from 'vite';
import react from '@vitejs/plugin-react';

export default defineConfig({
  plugins: [react()],
  build: {
    lib: {
      entry: 'src/index.tsx',
      name: '${plugin_name}',
      formats: ['es'],
      fileName: 'index'
    },
    rollupOptions: {
      external: ['react', 'react-dom'],
      output: {
        globals: {
          react: 'React',
          'react-dom': 'ReactDOM'
        }
      }
    }
  }
});
""")

PLAIN_INDEX = Template("""
import { addPropertyControls, ControlType } from 'framer';
import { motion } from 'framer-motion';
import React from 'react';

export default function ${component_name}() {
  return (
    <motion.div
      style={{
        width: 200,
        height: 200,
        backgroundColor: '#09F',
        borderRadius: 20,
      }}
      whileHover={{ scale: 1.1 }}
      whileTap={{ scale: 0.9 }}
    />
  );
}

addPropertyControls(${component_name}, {
  text: {
    type: ControlType.String,
    title: 'Text',
    defaultValue: '${default_text}',
  },
});
""")

WALLET_INDEX = Template("""
import { addPropertyControls, ControlType } from 'framer';
import { motion } from 'framer-motion';
import React from 'react';
import { Web3ReactProvider, useWeb3React } from '@web3-react/core';
import { InjectedConnector } from '@web3-react/injected-connector';
import { ethers } from 'ethers';

const injected = new InjectedConnector({
  supportedChainIds: [1, 3, 4, 5, 42],
});

function Web3Button() {
  const { activate, active, account, library } = useWeb3React();

  const connect = async () => {
    try {
      await activate(injected);
    } catch (error) {
      console.error('Error connecting:', error);
    }
  };

  return (
    <motion.button
      onClick={connect}
      whileHover={{ scale: 1.1 }}
      whileTap={{ scale: 0.9 }}
      style={{
        padding: '10px 20px',
        borderRadius: 8,
        backgroundColor: active ? '#4CAF50' : '#09F',
        color: 'white',
        border: 'none',
        cursor: 'pointer',
      }}
    >
      {active ? `Connected: $${account?.slice(0, 6)}...$${account?.slice(-4)}` : 'Connect Wallet'}
    </motion.button>
  );
}

export default function ${component_name}() {
  return (
    <Web3ReactProvider getLibrary={(provider) => new ethers.BrowserProvider(provider)}>
      <Web3Button />
    </Web3ReactProvider>
  );
}

addPropertyControls(${component_name}, {
  text: {
    type: ControlType.String,
    title: 'Text',
    defaultValue: '${default_text}',
  },
});
""")

PLAIN_DEFAULT_TEXT = "Hello World"
WALLET_DEFAULT_TEXT = "Connect Wallet"
