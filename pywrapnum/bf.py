#!/usr/bin/env python
# -*- coding: utf-8 -*-

import logging

from pywrapnum.wrapnum import WrapNum


class BrainfuckSyntaxError(ValueError):
    '''
    Unmatched bracket in a program, with the position it was found at.
    '''

    def __init__(self, msg, pos):
        super().__init__(f"{msg} at position {pos:d}")
        self.pos = pos


class BrainfuckMachine():
    '''
    Tape machine for Brainfuck programs, built on wrapping numbers: every cell
    wraps around 0..=cell_max and the data pointer wraps around the tape, so
    neither needs any bounds checks.
    '''

    def __init__(self, num_cells=30_000, cell_max=255, max_steps=10_000_000):
        '''
        :param num_cells: Length of the tape. Defaults to the traditional 30,000.
        :param cell_max: Largest value of a cell before wrapping back to 0. Defaults
        to 255 for a traditional unsigned byte, and cannot be larger since '.' writes
        a cell out as one byte.
        :param max_steps: Number of instructions to execute before giving up on a
        program that does not halt.
        '''
        if cell_max > 255:
            raise ValueError(f"Cells are written out as bytes, {cell_max:,d} maximum does not fit")
        self.num_cells = num_cells
        self.cell_max = cell_max
        self.max_steps = max_steps
        self.reset()

    def reset(self):
        self.cells = [WrapNum(0, self.cell_max)] * self.num_cells
        self.pointer = WrapNum(self.num_cells)

    @staticmethod
    def match_brackets(code):
        '''
        Map each '[' to its ']' and back, so jumps are a single lookup.
        '''
        jumps, stack = {}, []
        for pos, op in enumerate(code):
            if op == '[':
                stack.append(pos)
            elif op == ']':
                if len(stack) == 0:
                    raise BrainfuckSyntaxError("Unmatched ']'", pos)
                start = stack.pop()
                jumps[start], jumps[pos] = pos, start
        if len(stack) > 0:
            raise BrainfuckSyntaxError("Unmatched '['", stack[-1])
        return jumps

    def run(self, code, stdin=b''):
        '''
        Execute a program against the current tape and return everything it wrote
        with '.' as bytes. Reading with ',' past the end of `stdin` leaves the cell
        unchanged.
        '''
        jumps = BrainfuckMachine.match_brackets(code)
        stdin = iter(stdin)
        out = bytearray()
        logging.info(f"Running {len(code):,d} character program on a {self.num_cells:,d} cell tape.")

        pc, num_steps = 0, 0
        while pc < len(code):
            num_steps += 1
            if num_steps > self.max_steps:
                logging.debug(f"Stopped at {pc:d} program position, {self.pointer:d} pointer.")
                raise TimeoutError(f"More than {self.max_steps:,d} steps for program")

            op = code[pc]
            if op == '>':
                self.pointer += 1
            elif op == '<':
                self.pointer -= 1
            elif op == '+':
                self.cells[self.pointer] += 1
            elif op == '-':
                self.cells[self.pointer] -= 1
            elif op == '.':
                out.append(int(self.cells[self.pointer]))
            elif op == ',':
                byte = next(stdin, None)
                if byte is not None:
                    self.cells[self.pointer] = WrapNum(0, self.cell_max, value=byte)
            elif op == '[' and self.cells[self.pointer] == 0:
                pc = jumps[pc]
            elif op == ']' and self.cells[self.pointer] != 0:
                pc = jumps[pc]
            pc += 1

        logging.info(f"Program finished after {num_steps:,d} steps, wrote {len(out):,d} bytes.")
        return bytes(out)


def run_bf(code, stdin=b'', **config):
    '''
    Run a program on a fresh machine, configured with any of the BrainfuckMachine
    keyword arguments.
    '''
    return BrainfuckMachine(**config).run(code, stdin=stdin)
